from __future__ import annotations

import numpy as np
import plotly.graph_objects as go

from app.core.calculations import nice_ticks, stack_values, value_axis
from app.core.data import ChartDataError, DataSeries, series_to_frame
from app.core.themes import ChartStyle, ChartThemes
from app.ui.charts.common import base_layout


def build_bar_chart(
    series: list[DataSeries],
    title: str | None = None,
    x_axis_title: str | None = None,
    y_axis_title: str | None = None,
    stacked: bool = False,
    horizontal: bool = False,
    style: ChartStyle = ChartThemes.Default,
    height: int = 600,
) -> go.Figure:
    """Grouped or stacked bars, one color per series, categories from point labels."""
    if not series:
        raise ChartDataError("A bar chart needs at least one data series")

    # Rows are categories, columns are series; missing points count as zero
    df = series_to_frame(series).fillna(0.0)
    categories = list(df.index)
    matrix = df.to_numpy(dtype=float).T

    if stacked:
        bases, (lowest, highest) = stack_values(matrix)
        ticks = nice_ticks(lowest, highest)
    else:
        bases = np.zeros_like(matrix)
        ticks = value_axis(matrix.ravel())

    fig = go.Figure()
    for i, s in enumerate(series):
        values = matrix[i].tolist()
        hover = f"<b>{s.name}</b><br>%{{customdata}}: %{{{'x' if horizontal else 'y'}:,.2f}}<extra></extra>"
        if horizontal:
            bar = go.Bar(y=categories, x=values, base=bases[i].tolist() if stacked else None, orientation="h")
        else:
            bar = go.Bar(x=categories, y=values, base=bases[i].tolist() if stacked else None)
        bar.update(
            name=s.name,
            marker=dict(color=s.color, line=dict(width=0)),
            customdata=categories,
            hovertemplate=hover,
        )
        fig.add_trace(bar)

    # Bases are computed above, so "overlay" keeps plotly from re-stacking
    fig.update_layout(barmode="overlay" if stacked else "group", bargap=0.25, bargroupgap=0.08)
    base_layout(fig, style, title, height, x_axis_title, y_axis_title)

    category_axis = dict(**style.axis(), type="category", categoryorder="array", categoryarray=categories)
    value_axis_layout = dict(
        **style.axis(),
        range=[ticks.minimum, ticks.maximum],
        tickmode="array",
        tickvals=list(ticks.values),
    )
    if horizontal:
        fig.update_xaxes(**value_axis_layout, title_text=y_axis_title)
        fig.update_yaxes(**category_axis, title_text=x_axis_title, autorange="reversed")
    else:
        fig.update_xaxes(**category_axis, title_text=x_axis_title)
        fig.update_yaxes(**value_axis_layout, title_text=y_axis_title)
    return fig