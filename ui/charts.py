"""
Plotly chart builders for the Live Code Audit dashboard.
All functions return plotly Figure objects.
"""
from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from scoring.scorer import score_color

_BG = "#1A1D27"
_PAPER = "#0E1117"
_GRID = "#2A2D3A"
_TEXT = "#FAFAFA"

_CONTENT_COLORS = {
    "HTML":       "#E34C26",
    "CSS":        "#264DE4",
    "JavaScript": "#F0DB4F",
}


def _base_layout(**kwargs) -> dict:
    return {
        "paper_bgcolor": _PAPER,
        "plot_bgcolor":  _BG,
        "font": {"color": _TEXT, "family": "sans-serif"},
        "margin": {"l": 20, "r": 20, "t": 40, "b": 20},
        **kwargs,
    }


# ── Score gauge ────────────────────────────────────────────────────────────────

def score_gauge(score: float, title: str) -> go.Figure:
    color = score_color(score)
    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=score,
        domain={"x": [0, 1], "y": [0, 1]},
        number={"font": {"size": 44, "color": color}},
        gauge={
            "axis": {"range": [0, 100], "tickcolor": _TEXT, "tickfont": {"color": _TEXT}},
            "bar": {"color": color, "thickness": 0.25},
            "bgcolor": _BG,
            "borderwidth": 2,
            "bordercolor": _GRID,
            "steps": [
                {"range": [0, 50],  "color": "#3A1A1A"},
                {"range": [50, 75], "color": "#3A2E1A"},
                {"range": [75, 90], "color": "#2A3A1A"},
                {"range": [90, 100],"color": "#1A3A1A"},
            ],
        },
    ))
    fig.update_layout(
        **_base_layout(height=240),
        title={"text": title, "x": 0.5, "xanchor": "center",
               "font": {"size": 14, "color": _TEXT}},
    )
    return fig


# ── Deductions per content type ────────────────────────────────────────────────

def deductions_bar(feedback_df: pd.DataFrame) -> go.Figure:
    """Total points lost per content type, from exporter.feedback_to_df()."""
    if feedback_df.empty or feedback_df["Deduction"].sum() == 0:
        return _empty_chart("No deductions")

    totals = feedback_df.groupby("Content", sort=False)["Deduction"].sum()
    labels = list(totals.index)

    fig = go.Figure(go.Bar(
        x=labels,
        y=list(totals.values),
        marker_color=[_CONTENT_COLORS.get(label, "#6C63FF") for label in labels],
        hovertemplate="<b>%{x}</b><br>Points lost: %{y}<extra></extra>",
    ))
    fig.update_layout(
        **_base_layout(height=260),
        title={"text": "Points Lost by Content Type", "x": 0.5, "xanchor": "center",
               "font": {"size": 14, "color": _TEXT}},
        xaxis={"gridcolor": _GRID, "color": _TEXT},
        yaxis={"title": "Points", "gridcolor": _GRID, "color": _TEXT},
        showlegend=False,
    )
    return fig


# ── Helper ─────────────────────────────────────────────────────────────────────

def _empty_chart(message: str) -> go.Figure:
    fig = go.Figure()
    fig.add_annotation(text=message, x=0.5, y=0.5, showarrow=False, font={"color": _TEXT, "size": 14})
    fig.update_layout(**_base_layout(height=260))
    return fig
