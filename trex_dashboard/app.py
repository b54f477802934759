from __future__ import annotations
import streamlit as st

from trex_dashboard import config
from trex_dashboard.components.charts import ColorAssigner
from trex_dashboard.core import state as S
from trex_dashboard.core.engine import LandscapeEngine
from trex_dashboard.core.io import DatasetLoadError, load_store
from trex_dashboard.core.utils import suggest_diseases
from trex_dashboard.logging_setup import setup_logging
from trex_dashboard.theme import inject
from trex_dashboard.views import explorer

setup_logging()

# --- Page config ---
st.set_page_config(page_title=config.APP_TITLE, page_icon=config.PAGE_ICON, layout=config.LAYOUT,
                   initial_sidebar_state=config.INITIAL_SIDEBAR_STATE)
inject()

# --- Ensure session keys exist ---
if S.SELECTED_DISEASE not in st.session_state: st.session_state[S.SELECTED_DISEASE] = ""
if S.INCLUDE_PUBMED not in st.session_state: st.session_state[S.INCLUDE_PUBMED] = S.DEFAULT_INCLUDE_PUBMED
if S.COLOR_ASSIGNER not in st.session_state: st.session_state[S.COLOR_ASSIGNER] = ColorAssigner()

# --- Data ---
try:
    store = load_store(tuple(sorted(config.dataset_sources().items())))
except DatasetLoadError as e:
    st.error(str(e))
    st.stop()
if not store.has_data():
    st.warning("All datasets are empty; check TREX_DATA_BASE_URL.")
    st.stop()
engine = LandscapeEngine(store)

# --- Sidebar ---
with st.sidebar:
    st.markdown("## TREX DISEASE LANDSCAPE")
    st.markdown('<div class="section-divider"></div>', unsafe_allow_html=True)

    query = st.text_input("Search disease…", key=S.SEARCH_QUERY, placeholder="e.g. lupus")
    matches = suggest_diseases(query, engine.distinct_diseases())
    if query and not matches:
        st.caption("No matching diseases.")
    if matches:
        current = st.session_state[S.SELECTED_DISEASE]
        picked = st.selectbox("Disease", matches, index=matches.index(current) if current in matches else 0)
        st.session_state[S.SELECTED_DISEASE] = picked

    st.checkbox("Include PubMed", key=S.INCLUDE_PUBMED)

    st.markdown('<div class="section-divider"></div>', unsafe_allow_html=True)
    for name, count in store.summary().items():
        st.caption(f"{name.replace('_', ' ').title()}: {count:,} rows")
    st.caption(f"TrEx Landscape v{config.APP_VERSION}")

# --- Main view ---
explorer.render(
    engine,
    st.session_state[S.SELECTED_DISEASE],
    st.session_state[S.INCLUDE_PUBMED],
    st.session_state[S.COLOR_ASSIGNER],
)
