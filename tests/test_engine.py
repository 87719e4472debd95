"""Tests for smoothing, stacking, pie, histogram and radar geometry."""

import math

import numpy as np
import pytest

from app.core.calculations import (
    arc_outline,
    bins_to_frame,
    compute_bins,
    pie_geometry,
    polar_point,
    radar_angles,
    radar_layout,
    smooth_curve,
    stack_values,
)
from app.core.data import ChartDataError, DataPoint, DataSeries, PieChartSegment
from app.core.samples import customer_ages


# ---------------------------------------------------------------------------
# Smoothing
# ---------------------------------------------------------------------------

def test_smooth_curve_passes_through_points():
    xs, ys = [0, 1, 2, 3], [10, 15, 8, 12]
    sx, sy = smooth_curve(xs, ys, samples_per_segment=8)
    assert len(sx) == 3 * 8 + 1
    for x, y in zip(xs, ys):
        idx = np.where(np.isclose(sx, x))[0]
        assert idx.size >= 1
        assert sy[idx[0]] == pytest.approx(y)


def test_smooth_curve_no_overshoot():
    xs, ys = [0, 1, 2, 3, 4], [10, 15, 8, 12, 20]
    n = 16
    sx, sy = smooth_curve(xs, ys, samples_per_segment=n)
    for i in range(len(xs) - 1):
        seg = sy[i * n:(i + 1) * n + 1]
        assert seg.min() >= min(ys[i], ys[i + 1]) - 1e-9
        assert seg.max() <= max(ys[i], ys[i + 1]) + 1e-9


def test_smooth_curve_x_monotonic():
    sx, _ = smooth_curve([0, 1, 3, 4], [1, 5, 2, 2])
    assert np.all(np.diff(sx) >= 0)


def test_smooth_curve_short_input_unchanged():
    sx, sy = smooth_curve([1.0], [2.0])
    assert sx.tolist() == [1.0]
    assert sy.tolist() == [2.0]


def test_smooth_curve_rejects_mismatch():
    with pytest.raises(ChartDataError):
        smooth_curve([0, 1], [1])
    with pytest.raises(ChartDataError):
        smooth_curve([0, 1], [1, 2], samples_per_segment=0)


# ---------------------------------------------------------------------------
# Stacking
# ---------------------------------------------------------------------------

def test_stack_positive():
    bases, extent = stack_values([[1, 2], [3, 4]])
    assert bases.tolist() == [[0, 0], [1, 2]]
    assert extent == (0.0, 6.0)


def test_stack_mixed_signs_do_not_overlap():
    bases, extent = stack_values([[2, -1], [-3, 4], [1, -2]])
    # column 0: +2 from 0, -3 from 0, +1 from 2
    assert bases[:, 0].tolist() == [0, 0, 2]
    # column 1: -1 from 0, +4 from 0, -2 from -1
    assert bases[:, 1].tolist() == [0, 0, -1]
    assert extent == (-3.0, 4.0)


def test_stack_rejects_1d():
    with pytest.raises(ChartDataError):
        stack_values([1, 2, 3])


# ---------------------------------------------------------------------------
# Pie geometry
# ---------------------------------------------------------------------------

def test_pie_sweeps_and_percentages(quarter_segments):
    geometry = pie_geometry(quarter_segments)
    assert sum(g.sweep for g in geometry) == pytest.approx(360)
    assert sum(g.percentage for g in geometry) == pytest.approx(100)
    assert [g.start_angle for g in geometry] == pytest.approx([0, 90, 180, 270])
    assert geometry[0].mid_angle == pytest.approx(45)


def test_pie_segments_are_contiguous():
    segs = [PieChartSegment(str(v), v, "#FFFFFF") for v in (35, 25, 20, 15, 5)]
    geometry = pie_geometry(segs, start_angle=-90)
    for a, b in zip(geometry, geometry[1:]):
        assert b.start_angle == pytest.approx(a.end_angle)
    assert geometry[-1].end_angle == pytest.approx(270)


def test_pie_zero_segment_has_no_sweep():
    segs = [PieChartSegment("A", 3, "#FFFFFF"), PieChartSegment("B", 0, "#FFFFFF")]
    geometry = pie_geometry(segs)
    assert geometry[1].sweep == 0
    assert geometry[0].sweep == pytest.approx(360)


def test_pie_donut_hole(quarter_segments):
    geometry = pie_geometry(quarter_segments, donut=True, hole_ratio=0.5)
    assert all(g.inner_radius == 0.5 for g in geometry)
    # label sits in the middle of the ring
    x, y = geometry[0].label_anchor
    assert math.hypot(x, y) == pytest.approx(0.75)


def test_pie_explode_selected(quarter_segments):
    geometry = pie_geometry(quarter_segments, selected=1, explode_offset=0.1)
    dx, dy = geometry[1].offset
    assert math.hypot(dx, dy) == pytest.approx(0.1)
    # mid angle 135 deg clockwise from top points right and down
    assert dx > 0 and dy < 0
    assert geometry[0].offset == (0.0, 0.0)


@pytest.mark.parametrize("kwargs", [{"selected": 4}, {"selected": -1}, {"hole_ratio": 1.0}])
def test_pie_rejects_bad_options(quarter_segments, kwargs):
    with pytest.raises(ChartDataError):
        pie_geometry(quarter_segments, **kwargs)


def test_pie_rejects_empty_and_zero_total():
    with pytest.raises(ChartDataError):
        pie_geometry([])
    with pytest.raises(ChartDataError):
        pie_geometry([PieChartSegment("A", 0, "#FFFFFF")])


def test_polar_point_clockwise_from_top():
    assert polar_point(0, 1) == pytest.approx((0, 1))
    assert polar_point(90, 1) == pytest.approx((1, 0))


def test_arc_outline_closed_and_on_radius(quarter_segments):
    g = pie_geometry(quarter_segments)[0]
    xs, ys = arc_outline(g)
    assert (xs[0], ys[0]) == (xs[-1], ys[-1])
    r = np.hypot(xs, ys)
    assert r.max() == pytest.approx(1.0)
    assert r.min() == pytest.approx(0.0)


def test_arc_outline_ring_sector(quarter_segments):
    g = pie_geometry(quarter_segments, donut=True, hole_ratio=0.5)[2]
    xs, ys = arc_outline(g)
    r = np.hypot(xs, ys)
    assert r.min() == pytest.approx(0.5)


# ---------------------------------------------------------------------------
# Histogram
# ---------------------------------------------------------------------------

def test_bins_cover_sample():
    ages = customer_ages()
    bins = compute_bins(ages, 10)
    assert len(bins) == 10
    assert sum(b.count for b in bins) == len(ages)
    assert bins[0].start == 22
    assert bins[-1].end == 65
    for a, b in zip(bins, bins[1:]):
        assert b.start == pytest.approx(a.end)


def test_bins_last_bin_counts_max():
    bins = compute_bins([0, 1, 2, 3, 4], 2)
    assert [b.count for b in bins] == [2, 3]


def test_bins_constant_sample():
    bins = compute_bins([7, 7, 7], 3)
    assert sum(b.count for b in bins) == 3
    assert bins[0].start == 6.5
    assert bins[-1].end == 7.5


@pytest.mark.parametrize("values,bin_count", [([], 5), ([1, 2], 0), ([1, 2], -3), ([1, float("nan")], 2), ([1, 2], 2.5), (["a", 2], 2)])
def test_bins_reject_bad_input(values, bin_count):
    with pytest.raises(ChartDataError):
        compute_bins(values, bin_count)


def test_bins_to_frame():
    df = bins_to_frame(compute_bins([0, 1, 2, 3, 4], 2))
    assert list(df.columns) == ["Range", "Start", "End", "Count"]
    assert df["Range"].tolist() == ["[0, 2)", "[2, 4]"]
    assert df["Count"].sum() == 5


# ---------------------------------------------------------------------------
# Radar
# ---------------------------------------------------------------------------

def test_radar_angles():
    assert radar_angles(4).tolist() == [0, 90, 180, 270]


def test_radar_layout_scales_to_nice_max(triangle_series):
    layout = radar_layout(triangle_series, ["a", "b", "c"])
    assert layout.scale.domain == (0.0, 10.0)
    assert layout.ring_values[-1] == 10
    poly = layout.polygons[0]
    # first vertex: value 10 at the top of the unit circle
    assert (poly.xs[0], poly.ys[0]) == pytest.approx((0, 1))
    # zero value collapses to the center
    assert (poly.xs[2], poly.ys[2]) == pytest.approx((0, 0))
    # closed polygon
    assert len(poly.xs) == 4


def test_radar_layout_explicit_max(triangle_series):
    layout = radar_layout(triangle_series, ["a", "b", "c"], max_value=100)
    assert layout.scale.domain[1] == 100
    assert layout.polygons[0].ys[0] == pytest.approx(0.1)


def test_radar_label_anchors_outside_web(triangle_series):
    layout = radar_layout(triangle_series, ["a", "b", "c"])
    for x, y in layout.label_anchors:
        assert math.hypot(x, y) > 1


def test_radar_rejects_bad_input(triangle_series):
    with pytest.raises(ChartDataError):
        radar_layout(triangle_series, ["a", "b"])
    with pytest.raises(ChartDataError):
        radar_layout(triangle_series, ["a", "b", "c", "d"])
    negative = [DataSeries("N", "#000000", [DataPoint(i, -1) for i in range(3)])]
    with pytest.raises(ChartDataError):
        radar_layout(negative, ["a", "b", "c"])
    with pytest.raises(ChartDataError):
        radar_layout([], ["a", "b", "c"])
