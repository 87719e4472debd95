from __future__ import annotations

import logging

import plotly.graph_objects as go
import streamlit as st

from app.core.calculations import plot_margins
from app.core.data import ChartDataError
from app.core.themes import ChartStyle

logger = logging.getLogger(__name__)


def base_layout(
    fig: go.Figure,
    style: ChartStyle,
    title: str | None,
    height: int,
    x_axis_title: str | None = None,
    y_axis_title: str | None = None,
    show_legend: bool | None = None,
) -> go.Figure:
    """Title, margins, colors and legend shared by every widget."""
    legend_on = style.show_legend if show_legend is None else show_legend
    layout = style.layout()
    layout["showlegend"] = legend_on
    fig.update_layout(
        **layout,
        height=height,
        margin=plot_margins(title, x_axis_title, y_axis_title, show_legend=legend_on),
        legend=dict(
            orientation="h",
            yanchor="top",
            y=-0.15 if x_axis_title else -0.08,
            xanchor="center",
            x=0.5,
        ),
        hovermode="closest",
    )
    if title:
        fig.update_layout(title=dict(
            text=title,
            x=0.5,
            xanchor="center",
            font=dict(size=style.title_size, color=style.text_color),
        ))
    return fig


def hidden_axes(fig: go.Figure, extent: float) -> go.Figure:
    """Equal-aspect invisible axes for charts drawn in unit-circle space."""
    axis = dict(
        visible=False,
        showgrid=False,
        zeroline=False,
        range=[-extent, extent],
        fixedrange=True,
    )
    fig.update_xaxes(**axis)
    fig.update_yaxes(**axis, scaleanchor="x", scaleratio=1)
    return fig


def show_figure(build, *args, key: str | None = None, **kwargs) -> go.Figure | None:
    """Build a figure and display it, reporting bad chart data in place."""
    try:
        fig = build(*args, **kwargs)
    except ChartDataError as e:
        logger.warning(f"{build.__name__} rejected chart data: {e}")
        st.error(f"Impossible d'afficher le graphique : {e}")
        return None
    st.plotly_chart(fig, key=key)
    return fig
