from __future__ import annotations
from typing import Mapping, Sequence

import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from trex_dashboard.theme import CHART_COLORS, PLOTLY_LAYOUT

class ColorAssigner:
    """Hands out palette colours so the same label keeps its colour across charts and refreshes."""

    def __init__(self, palette: Sequence[str] = CHART_COLORS):
        self.palette = list(palette)
        self._assigned: dict[str, str] = {}

    def assign(self, label: str) -> str:
        if label not in self._assigned:
            self._assigned[label] = self.palette[len(self._assigned) % len(self.palette)]
        return self._assigned[label]

    def color_map(self, labels) -> dict[str, str]:
        return {label: self.assign(label) for label in labels}

def pie_figure(counts: Mapping[str, int], title: str, colors: ColorAssigner) -> go.Figure:
    labels = list(counts.keys())
    if not labels:
        fig = go.Figure()
        fig.update_layout(**PLOTLY_LAYOUT, title=title)
        return fig
    values = [counts[l] for l in labels]
    fig = px.pie(
        names=labels, values=values, title=title,
        color=labels, color_discrete_map=colors.color_map(labels),
    )
    fig.update_layout(**PLOTLY_LAYOUT, legend=dict(x=1.02, y=0.5))
    fig.update_traces(textposition='inside', textinfo='percent')
    return fig

def render_pie(counts: Mapping[str, int], title: str, colors: ColorAssigner, key: str | None = None):
    """Pie chart of label -> count; an empty mapping renders a blank chart with a caption."""
    st.plotly_chart(pie_figure(counts, title, colors), width="stretch", key=key)
    if not counts:
        st.caption(f"No data for {title.lower()}.")
