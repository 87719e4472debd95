from __future__ import annotations

import plotly.graph_objects as go

from app.core.calculations import radar_layout
from app.core.data import DataSeries
from app.core.palettes import with_alpha
from app.core.themes import ChartStyle, ChartThemes
from app.ui.charts.common import base_layout, hidden_axes


def build_radar_chart(
    series: list[DataSeries],
    categories: list[str],
    title: str | None = None,
    fill_area: bool = True,
    show_points: bool = True,
    max_value: float | None = None,
    style: ChartStyle = ChartThemes.Default,
    height: int = 550,
) -> go.Figure:
    """Radar (spider) chart: web rings and spokes, then one polygon per series."""
    layout = radar_layout(series, categories, max_value=max_value)
    fig = go.Figure()

    grid = dict(color=style.grid_color if style.show_grid else "rgba(0,0,0,0)", width=1)
    for value, (xs, ys) in zip(layout.ring_values, layout.rings):
        fig.add_trace(go.Scatter(
            x=xs, y=ys, mode="lines", line=grid,
            showlegend=False, hoverinfo="skip", name=f"{value:g}",
        ))
    for x, y in layout.spokes:
        fig.add_trace(go.Scatter(
            x=[0, x], y=[0, y], mode="lines", line=grid,
            showlegend=False, hoverinfo="skip",
        ))

    for poly in layout.polygons:
        # Closed rings repeat the first vertex; hover labels follow suit
        labels = list(layout.categories) + [layout.categories[0]]
        values = list(poly.values) + [poly.values[0]]
        fig.add_trace(go.Scatter(
            x=poly.xs,
            y=poly.ys,
            mode="lines+markers" if show_points else "lines",
            name=poly.name,
            line=dict(color=poly.color, width=style.line_width),
            marker=dict(size=style.point_size, color=poly.color),
            fill="toself" if fill_area else None,
            fillcolor=with_alpha(poly.color, style.fill_alpha) if fill_area else None,
            customdata=list(zip(labels, values)),
            hovertemplate=f"<b>{poly.name}</b><br>%{{customdata[0]}}: %{{customdata[1]:g}}<extra></extra>",
        ))

    base_layout(fig, style, title, height)
    hidden_axes(fig, extent=1.35)

    annotations = [
        dict(
            x=x, y=y, xref="x", yref="y",
            text=category,
            showarrow=False,
            font=dict(size=13, color=style.text_color),
        )
        for category, (x, y) in zip(layout.categories, layout.label_anchors)
    ]
    # Ring values along the first spoke
    for value in layout.ring_values:
        annotations.append(dict(
            x=0.03, y=layout.scale(value), xref="x", yref="y",
            text=f"{value:g}",
            showarrow=False,
            xanchor="left",
            font=dict(size=10, color=style.axis_color),
        ))
    fig.update_layout(annotations=annotations)
    return fig