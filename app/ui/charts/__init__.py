"""
Chart widgets: pure Plotly figure builders, shown through common.show_figure.

Sub-modules:
  line: line chart, optional smoothing, points and area fill
  bar: grouped / stacked, vertical / horizontal bars
  pie: pie and donut, percentages, exploded or highlighted selection
  histogram: equal-width binned distribution
  radar: spider chart with web rings
  common: shared layout and error reporting
"""

from app.ui.charts.line import build_line_chart
from app.ui.charts.bar import build_bar_chart
from app.ui.charts.pie import build_pie_chart
from app.ui.charts.histogram import build_histogram
from app.ui.charts.radar import build_radar_chart

__all__ = [
    "build_line_chart",
    "build_bar_chart",
    "build_pie_chart",
    "build_histogram",
    "build_radar_chart",
]
