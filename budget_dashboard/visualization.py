"""Plotly visualisation helpers for the Budget Dashboard.

Each function accepts one of the chart projections produced by
:mod:`calculations` (or by the ledger) and returns a
`plotly.graph_objects.Figure` that Streamlit renders via
``st.plotly_chart``.  The functions never compute budget figures
themselves; they only lay out what they are given.
"""

from __future__ import annotations

from typing import Sequence

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

try:
    from .calculations import BarEntry, PieSegment
    from .formatting import format_currency
except ImportError:
    from calculations import BarEntry, PieSegment
    from formatting import format_currency

BUDGET_BAR_COLOR = "#94a3b8"
ACTUAL_BAR_COLOR = "#6366f1"


def _empty_figure(title: str = "No data to display") -> go.Figure:
    fig = go.Figure()
    fig.update_layout(title=title)
    return fig


def create_allocation_pie_chart(segments: Sequence[PieSegment], title: str | None = None) -> go.Figure:
    """Generate a donut chart of where the money went.

    Parameters
    ----------
    segments : sequence of PieSegment
        Non-empty categories with their totals and colours.
    title : str, optional
        Chart title.

    Returns
    -------
    plotly.graph_objects.Figure
        Donut chart, or an empty figure when there is nothing to show.
    """
    if not segments:
        return _empty_figure()
    fig = go.Figure(
        go.Pie(
            labels=[s.label for s in segments],
            values=[s.value for s in segments],
            marker={"colors": [s.color for s in segments]},
            hole=0.55,
            sort=False,
            customdata=[format_currency(s.value) for s in segments],
            hovertemplate="%{label}: %{customdata}<extra></extra>",
        )
    )
    fig.update_layout(title=title or "Spending breakdown")
    return fig


def create_budget_vs_actual_chart(series: Sequence[BarEntry], title: str | None = None) -> go.Figure:
    """Render budget targets next to actual totals as grouped bars.

    Parameters
    ----------
    series : sequence of BarEntry
        One row per budget category.
    title : str, optional
        Chart title.

    Returns
    -------
    plotly.graph_objects.Figure
        Grouped bar chart with ``Budget`` and ``Actual`` traces.
    """
    labels = [entry.label for entry in series]
    fig = go.Figure()
    fig.add_trace(go.Bar(name="Budget", x=labels, y=[e.budget_value for e in series], marker_color=BUDGET_BAR_COLOR))
    fig.add_trace(go.Bar(name="Actual", x=labels, y=[e.actual_value for e in series], marker_color=ACTUAL_BAR_COLOR))
    fig.update_layout(
        title=title or "Budget vs actual",
        barmode="group",
        xaxis_title="Category",
        yaxis_title="Amount",
    )
    return fig


def create_expense_category_chart(breakdown: pd.Series, title: str | None = None) -> go.Figure:
    """Generate a bar chart of daily spending by transaction category.

    Parameters
    ----------
    breakdown : pandas.Series
        Series indexed by category with summed amounts.
    title : str, optional
        Title for the chart.

    Returns
    -------
    plotly.graph_objects.Figure
        Bar chart of categories vs amounts.
    """
    if breakdown.empty:
        return _empty_figure()
    df = breakdown.reset_index()
    df.columns = ["Category", "Amount"]
    fig = px.bar(df, x="Category", y="Amount")
    fig.update_layout(
        title=title or "Belanja by category",
        xaxis_title="Category",
        yaxis_title="Amount",
    )
    return fig
