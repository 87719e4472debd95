"""Charting engine: axis layout, scaling, smoothing, stacking, pie/radar geometry, binning."""

from app.core.calculations.scaling import (
    AxisTicks,
    LinearScale,
    nice_number,
    nice_ticks,
    plot_margins,
    value_axis,
)
from app.core.calculations.smoothing import smooth_curve
from app.core.calculations.stacking import stack_values
from app.core.calculations.pie import (
    SegmentGeometry,
    arc_outline,
    pie_geometry,
    polar_point,
)
from app.core.calculations.histogram import (
    HistogramBin,
    bins_to_frame,
    compute_bins,
)
from app.core.calculations.radar import (
    RadarLayout,
    RadarPolygon,
    radar_angles,
    radar_layout,
)

__all__ = [
    "AxisTicks",
    "LinearScale",
    "nice_number",
    "nice_ticks",
    "plot_margins",
    "value_axis",
    "smooth_curve",
    "stack_values",
    "SegmentGeometry",
    "arc_outline",
    "pie_geometry",
    "polar_point",
    "HistogramBin",
    "bins_to_frame",
    "compute_bins",
    "RadarLayout",
    "RadarPolygon",
    "radar_angles",
    "radar_layout",
]
