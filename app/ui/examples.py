"""
The five demo examples.

Each *_example() builds its figure from the static sample data; EXAMPLES maps
a ChartType to its header, widget title, builder and data table so the
Streamlit card and the API share one definition.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from app.common.constants import ChartType
from app.core import samples
from app.core.calculations import bins_to_frame, compute_bins
from app.core.data import series_to_frame
from app.core.palettes import ColorPalettes
from app.core.themes import ChartStyle, ChartThemes
from app.ui.charts import (
    build_bar_chart,
    build_histogram,
    build_line_chart,
    build_pie_chart,
    build_radar_chart,
)
from app.ui.charts.common import show_figure
from app.ui.theme import chart_title_header

HISTOGRAM_BINS = 10


def line_chart_example(style: ChartStyle | None = None) -> go.Figure:
    return build_line_chart(
        samples.create_sales_data(),
        title="Ventes mensuelles",
        x_axis_title="Mois",
        y_axis_title="Ventes (K€)",
        smooth_curve=True,
        show_points=True,
        fill_area=True,
        style=style or ChartThemes.Default,
        height=500,
    )


def bar_chart_example(style: ChartStyle | None = None) -> go.Figure:
    return build_bar_chart(
        samples.create_sales_data(),
        title="Ventes par mois",
        x_axis_title="Mois",
        y_axis_title="Ventes (K€)",
        stacked=False,
        horizontal=False,
        style=style or ChartThemes.Colorful,
        height=600,
    )


def pie_chart_example(style: ChartStyle | None = None) -> go.Figure:
    return build_pie_chart(
        samples.product_segments(),
        title="Ventes par produit",
        donut=True,
        show_percentages=True,
        style=style or ChartThemes.Default,
        height=600,
    )


def histogram_example(style: ChartStyle | None = None) -> go.Figure:
    return build_histogram(
        samples.customer_ages(),
        title="Âges des clients",
        x_axis_title="Âge",
        y_axis_title="Fréquence",
        bin_count=HISTOGRAM_BINS,
        bar_color=ColorPalettes.Vibrant[1],
        style=style or ChartThemes.Default,
        height=600,
    )


def radar_chart_example(style: ChartStyle | None = None) -> go.Figure:
    return build_radar_chart(
        samples.vehicle_comparison(),
        samples.radar_categories(),
        title="Comparaison des performances",
        fill_area=True,
        show_points=True,
        style=style or ChartThemes.Colorful,
        height=550,
    )


def _segments_frame() -> pd.DataFrame:
    df = pd.DataFrame(
        [{"Produit": s.label, "Ventes": s.value} for s in samples.product_segments()]
    )
    df["Part %"] = (100 * df["Ventes"] / df["Ventes"].sum()).round(1)
    return df


def _radar_frame() -> pd.DataFrame:
    df = series_to_frame(samples.vehicle_comparison())
    df.index.name = "Critère"
    return df


@dataclass(frozen=True)
class Example:
    header: str
    title: str
    build: Callable[[ChartStyle | None], go.Figure]
    table: Callable[[], pd.DataFrame]


EXAMPLES: dict[ChartType, Example] = {
    ChartType.LINE: Example(
        "Évolution des Ventes", "Ventes mensuelles", line_chart_example,
        lambda: series_to_frame(samples.create_sales_data()),
    ),
    ChartType.BAR: Example(
        "Comparaison des Ventes", "Ventes par mois", bar_chart_example,
        lambda: series_to_frame(samples.create_sales_data()),
    ),
    ChartType.PIE: Example(
        "Répartition des Ventes", "Ventes par produit", pie_chart_example,
        _segments_frame,
    ),
    ChartType.HISTOGRAM: Example(
        "Distribution des Âges", "Âges des clients", histogram_example,
        lambda: bins_to_frame(compute_bins(samples.customer_ages(), HISTOGRAM_BINS)),
    ),
    ChartType.RADAR: Example(
        "Comparaison de Produits", "Comparaison des performances", radar_chart_example,
        _radar_frame,
    ),
}


def render_example(chart_type: ChartType, style: ChartStyle | None = None, show_data: bool = False):
    """Header, chart and optional data table of one example."""
    example = EXAMPLES[chart_type]
    chart_title_header(example.header)
    show_figure(example.build, style, key=f"chart_{chart_type.name}")
    if show_data:
        with st.expander("Données", expanded=True):
            st.dataframe(example.table())
