from __future__ import annotations

import plotly.graph_objects as go

from app.core.calculations import arc_outline, pie_geometry
from app.core.data import PieChartSegment
from app.core.palettes import with_alpha
from app.core.themes import ChartStyle, ChartThemes
from app.ui.charts.common import base_layout, hidden_axes

EXPLODE_OFFSET = 0.08


def build_pie_chart(
    segments: list[PieChartSegment],
    title: str | None = None,
    donut: bool = False,
    show_percentages: bool = True,
    selected_index: int | None = None,
    explode_selection: bool = False,
    highlight_selection: bool = False,
    style: ChartStyle = ChartThemes.Default,
    height: int = 600,
) -> go.Figure:
    """
    Pie or donut chart drawn from the engine's segment outlines.

    With a selected segment, explode_selection pulls it out of the circle and
    highlight_selection dims every other segment.
    """
    geometry = pie_geometry(
        segments,
        donut=donut,
        selected=selected_index,
        explode_offset=EXPLODE_OFFSET if explode_selection else 0.0,
    )

    fig = go.Figure()
    for i, g in enumerate(geometry):
        xs, ys = arc_outline(g)
        dimmed = highlight_selection and selected_index is not None and i != selected_index
        fig.add_trace(go.Scatter(
            x=xs.tolist(),
            y=ys.tolist(),
            mode="lines",
            fill="toself",
            name=g.label,
            fillcolor=with_alpha(g.color, 0.35 if dimmed else 1.0),
            line=dict(color=style.background_color, width=2),
            hoveron="fills",
            hoverinfo="text",
            text=f"<b>{g.label}</b><br>{g.value:,.2f} ({g.percentage:.1f}%)",
        ))

    base_layout(fig, style, title, height)
    hidden_axes(fig, extent=1.25)

    annotations = []
    if show_percentages:
        for g in geometry:
            if g.sweep == 0:
                continue
            x, y = g.label_anchor
            annotations.append(dict(
                x=x, y=y, xref="x", yref="y",
                text=f"{g.percentage:.1f}%",
                showarrow=False,
                font=dict(size=13, color=style.text_color),
            ))
    if donut:
        total = sum(g.value for g in geometry)
        annotations.append(dict(
            x=0, y=0, xref="x", yref="y",
            text=f"<b>{total:,.0f}</b><br>Total",
            showarrow=False,
            font=dict(size=16, color=style.text_color),
        ))
    fig.update_layout(annotations=annotations)
    return fig