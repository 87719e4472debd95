from __future__ import annotations

import plotly.graph_objects as go

from app.core.calculations import smoothing, value_axis
from app.core.data import ChartDataError, DataSeries
from app.core.palettes import with_alpha
from app.core.themes import ChartStyle, ChartThemes
from app.ui.charts.common import base_layout


def build_line_chart(
    series: list[DataSeries],
    title: str | None = None,
    x_axis_title: str | None = None,
    y_axis_title: str | None = None,
    smooth_curve: bool = False,
    show_points: bool = True,
    fill_area: bool = False,
    style: ChartStyle = ChartThemes.Default,
    height: int = 500,
) -> go.Figure:
    """
    Line chart, one trace per series.

    Smoothed series are drawn from the engine's Bézier samples; the raw points
    are overlaid as markers when show_points is set.
    """
    if not series:
        raise ChartDataError("A line chart needs at least one data series")

    fig = go.Figure()
    all_y = []
    tick_x: dict[float, str] = {}

    for s in series:
        if len(s) == 0:
            raise ChartDataError(f"Series {s.name!r} has no points")
        all_y.extend(s.ys)
        for x, label in zip(s.xs, s.labels):
            tick_x.setdefault(x, label)

        if smooth_curve:
            xs, ys = smoothing.smooth_curve(s.xs, s.ys)
        else:
            xs, ys = s.xs, s.ys

        fig.add_trace(go.Scatter(
            x=list(xs),
            y=list(ys),
            mode="lines",
            name=s.name,
            legendgroup=s.name,
            line=dict(color=s.color, width=style.line_width),
            fill="tozeroy" if fill_area else None,
            fillcolor=with_alpha(s.color, style.fill_alpha) if fill_area else None,
            hoverinfo="skip" if show_points else None,
        ))

        if show_points:
            fig.add_trace(go.Scatter(
                x=s.xs,
                y=s.ys,
                mode="markers",
                name=s.name,
                legendgroup=s.name,
                showlegend=False,
                marker=dict(
                    color=s.color,
                    size=style.point_size,
                    line=dict(width=2, color=style.background_color),
                ),
                customdata=s.labels,
                hovertemplate=f"<b>{s.name}</b><br>%{{customdata}}: %{{y:,.2f}}<extra></extra>",
            ))

    ticks = value_axis(all_y)
    ordered = sorted(tick_x.items())

    base_layout(fig, style, title, height, x_axis_title, y_axis_title)
    fig.update_xaxes(
        **style.axis(),
        title_text=x_axis_title,
        tickmode="array",
        tickvals=[x for x, _ in ordered],
        ticktext=[label for _, label in ordered],
    )
    fig.update_yaxes(
        **style.axis(),
        title_text=y_axis_title,
        range=[ticks.minimum, ticks.maximum],
        tickmode="array",
        tickvals=list(ticks.values),
    )
    return fig