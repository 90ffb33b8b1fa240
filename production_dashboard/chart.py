"""
Production pie chart.

The figure is carried in a ChartState value owned by the caller (the
Streamlit app keeps it in session state). Passing None builds a new figure;
passing an existing state swaps the slice values in place.
"""

import logging
from dataclasses import dataclass

import plotly.graph_objects as go

from .config import CHART_COLORS, CHART_LABELS
from .kpis import ChartSegments

logger = logging.getLogger(__name__)


@dataclass
class ChartState:
    figure: go.Figure
    updates: int = 0


def chart_values(segments: ChartSegments) -> list[float]:
    return [segments.pure_production, segments.defect, segments.repair]


def _new_figure(values: list[float]) -> go.Figure:
    fig = go.Figure(go.Pie(
        labels=list(CHART_LABELS),
        values=values,
        marker=dict(colors=list(CHART_COLORS), line=dict(color="#1F2937", width=3)),
        sort=False,
    ))
    fig.update_layout(
        legend=dict(orientation="h", y=-0.1, font=dict(color="#D1D5DB", size=14)),
        paper_bgcolor="rgba(0,0,0,0)",
        margin=dict(l=10, r=10, t=10, b=40),
    )
    return fig


def update_chart(segments: ChartSegments, state: ChartState | None = None) -> ChartState:
    """Create the pie chart, or refresh an existing one with new values."""
    values = chart_values(segments)

    if state is None:
        logger.debug("Creating production chart")
        return ChartState(figure=_new_figure(values))

    state.figure.data[0].values = values
    state.updates += 1
    return state
