from __future__ import annotations
import streamlit as st

from trex_dashboard.components.charts import ColorAssigner, render_pie
from trex_dashboard.components.tables import (
    render_phase34, render_recommendations, render_results_table,
)
from trex_dashboard.core.engine import LandscapeEngine

def render(engine: LandscapeEngine, disease: str, include_pubmed: bool, colors: ColorAssigner):
    st.title("Disease Landscape")

    if not disease:
        st.info("Search for a disease in the sidebar to begin analysis")
        return

    result = engine.refresh(disease, include_pubmed)
    st.markdown(f"### {result.disease}")

    m1, m2, m3, m4 = st.columns(4)
    with m1: st.metric("Trial-drug links", sum(1 for r in result.rows if r.source == "ct"))
    with m2: st.metric("Publication-drug links", sum(1 for r in result.rows if r.source == "pubmed") if include_pubmed else "—")
    with m3: st.metric("Phase 3/4 drugs", len(result.phase34_drugs))
    with m4: st.metric("Recommendations", len(result.recommendations.recommendations))

    st.markdown('<div class="section-divider"></div>', unsafe_allow_html=True)

    st.markdown("### Clinical Trials")
    c1, c2 = st.columns(2)
    with c1: render_pie(result.interventions, "Clinical Trials by Intervention Type", colors, key="pie_interventions")
    with c2: render_pie(result.phases, "Clinical Trials by Phase", colors, key="pie_phases")
    c1, c2 = st.columns(2)
    with c1: render_pie(result.trial_categories, "CT Categorized Drugs", colors, key="pie_ct_categories")
    with c2: render_pie(dict(result.top_trial_drugs), "Top 10 CT Drugs", colors, key="pie_ct_top")

    if include_pubmed:
        st.markdown("### PubMed")
        c1, c2, c3 = st.columns(3)
        with c1: render_pie(result.publication_categories, "PubMed Categorized Drugs", colors, key="pie_pub_categories")
        with c2: render_pie(result.publication_types, "PubMed by Publication Type", colors, key="pie_pub_types")
        with c3: render_pie(dict(result.top_publication_drugs), "Top 10 PubMed Drugs", colors, key="pie_pub_top")

    st.markdown('<div class="section-divider"></div>', unsafe_allow_html=True)

    c1, c2 = st.columns([1, 2])
    with c1: render_phase34(result.phase34_drugs)
    with c2: render_recommendations(result.recommendations, result.recommendation_note)

    st.markdown('<div class="section-divider"></div>', unsafe_allow_html=True)
    render_results_table(result.rows)
