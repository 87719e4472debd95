from __future__ import annotations

import plotly.graph_objects as go

from app.core.calculations import compute_bins, nice_ticks
from app.core.palettes import color_at
from app.core.themes import ChartStyle, ChartThemes
from app.ui.charts.common import base_layout


def build_histogram(
    values,
    title: str | None = None,
    x_axis_title: str | None = None,
    y_axis_title: str | None = None,
    bin_count: int = 10,
    bar_color: str | None = None,
    style: ChartStyle = ChartThemes.Default,
    height: int = 600,
) -> go.Figure:
    # Manual binning so bar edges match the engine's bins exactly
    bins = compute_bins(values, bin_count)
    color = bar_color or color_at(style.palette, 0)

    fig = go.Figure(go.Bar(
        x=[b.center for b in bins],
        y=[b.count for b in bins],
        width=[b.width for b in bins],
        marker=dict(color=color, line=dict(width=1, color=style.background_color)),
        customdata=[[b.start, b.end] for b in bins],
        hovertemplate="[%{customdata[0]:.1f}, %{customdata[1]:.1f}]: %{y}<extra></extra>",
        name=y_axis_title or "Count",
    ))

    count_ticks = nice_ticks(0, max(b.count for b in bins))
    edges = [bins[0].start] + [b.end for b in bins]

    base_layout(fig, style, title, height, x_axis_title, y_axis_title, show_legend=False)
    fig.update_layout(bargap=0)
    fig.update_xaxes(
        **style.axis(),
        title_text=x_axis_title,
        range=[edges[0], edges[-1]],
        tickmode="array",
        tickvals=edges,
        ticktext=[f"{e:.1f}" for e in edges],
    )
    fig.update_yaxes(
        **style.axis(),
        title_text=y_axis_title,
        range=[0, count_ticks.maximum],
        tickmode="array",
        tickvals=list(count_ticks.values),
    )
    return fig