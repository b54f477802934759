import streamlit as st

PLOTLY_LAYOUT = dict(
    plot_bgcolor='#FFFFFF',
    paper_bgcolor='#FFFFFF',
    font=dict(
        color='#2A3F5F',
        family='Arial, sans-serif',
        size=12
    ),
    margin=dict(l=20, r=20, t=50, b=20),
    hoverlabel=dict(
        bgcolor='rgba(255,255,255,0.9)',
        font_color='#2A3F5F'
    )
)

# Label colours for the pie charts, assigned in first-seen order.
CHART_COLORS = [
    "#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd",
    "#8c564b", "#e377c2", "#7f7f7f", "#bcbd22", "#17becf",
    "#aec7e8", "#ffbb78", "#98df8a", "#ff9896"
]

DARK_CSS = """
<style>
div[data-testid="metric-container"] {
    background-color: #252830;
    border: 1px solid #3a3f4b;
    border-radius: 10px;
    padding: 10px;
}
.section-divider {
    height: 1px;
    background: #343a46;
    margin: 12px 0;
}
.reco-chip {
    background: #2d3340;
    border: 1px solid #444;
    color: #ffffff;
    padding: 2px 8px;
    border-radius: 12px;
    margin-right: 6px;
    font-size: 0.85rem;
}
</style>
"""

def inject():
    st.markdown(DARK_CSS, unsafe_allow_html=True)
