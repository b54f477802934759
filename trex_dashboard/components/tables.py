from __future__ import annotations
import html
from typing import Sequence

import pandas as pd
import streamlit as st

from trex_dashboard.core.engine import ResultRow
from trex_dashboard.core.recommend import RecommendationResult
from trex_dashboard.core.utils import trial_links

_SOURCE_LABEL = {"ct": "ClinicalTrials.gov", "pubmed": "PubMed"}

def results_frame(rows: Sequence[ResultRow]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"Link": r.url, "Disease": r.disease, "Drug": r.drug, "Source": _SOURCE_LABEL.get(r.source, r.source)}
         for r in rows],
        columns=["Link", "Disease", "Drug", "Source"],
    )

def render_phase34(drugs: Sequence[str]):
    st.markdown("#### Drugs in Phase 3/4 Trials")
    if not drugs:
        st.info("No phase 3 or 4 trials with linked drugs.")
        return
    st.markdown("\n".join(f"- {d}" for d in drugs))

def _cell(text: str) -> str:
    """Make dataset text safe inside an HTML-enabled markdown table cell."""
    return html.escape(str(text)).replace("|", "\\|")

def recommendation_markdown(result: RecommendationResult) -> str:
    lines = ["| # | Drug | Trials | Examples |", "|---|---|---|---|"]
    for idx, rec in enumerate(result.recommendations, start=1):
        diseases = ", ".join(_cell(d) for d in rec.diseases) or "—"
        examples = f"**Diseases:** {diseases}<br>**NCTs:** {trial_links(_cell(n) for n in rec.ncts)}"
        lines.append(f"| {idx} | {_cell(rec.drug)} | {rec.count} | {examples} |")
    return "\n".join(lines)

def similar_disease_chips(diseases: Sequence[str]) -> str:
    return " ".join(f"<span class='reco-chip'>{html.escape(d)}</span>" for d in diseases)

def render_recommendations(result: RecommendationResult, note: str):
    st.markdown("#### Recommended Drugs (Top 5)")
    if result.is_empty:
        st.info(note)
        return
    st.markdown(recommendation_markdown(result), unsafe_allow_html=True)
    st.caption("Similar diseases (shared trial drugs):")
    st.markdown(similar_disease_chips(result.similar_diseases), unsafe_allow_html=True)

def render_results_table(rows: Sequence[ResultRow]):
    st.markdown(f"#### Results: {len(rows)} links")
    if not rows:
        st.info("No trial or publication links for this disease.")
        return
    st.dataframe(
        results_frame(rows),
        width="stretch",
        hide_index=True,
        column_config={
            "Link": st.column_config.LinkColumn("ID", display_text=r"([^/]+)/?$"),
        },
    )
