"""Tests for app/core/calculations/scaling.py: pure functions, no mocking needed."""

import numpy as np
import pytest

from app.core.calculations import LinearScale, nice_number, nice_ticks, plot_margins, value_axis
from app.core.data import ChartDataError


# ---------------------------------------------------------------------------
# nice_number
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("value,expected", [(1.2, 1), (2.5, 2), (4, 5), (8, 10), (0.034, 0.05), (140, 100)])
def test_nice_number_rounded(value, expected):
    assert nice_number(value, round_=True) == pytest.approx(expected)


@pytest.mark.parametrize("value,expected", [(1.0, 1), (1.2, 2), (3, 5), (6, 10), (95, 100)])
def test_nice_number_ceiling(value, expected):
    assert nice_number(value, round_=False) == pytest.approx(expected)


def test_nice_number_rejects_non_positive():
    with pytest.raises(ChartDataError):
        nice_number(0, round_=True)


# ---------------------------------------------------------------------------
# nice_ticks
# ---------------------------------------------------------------------------

def test_nice_ticks_sales_range():
    """0..20 gives ticks every 5."""
    ticks = nice_ticks(0, 20)
    assert ticks.values == (0, 5, 10, 15, 20)
    assert ticks.step == 5


def test_nice_ticks_cover_range():
    ticks = nice_ticks(-3.7, 41.2)
    assert ticks.minimum <= -3.7
    assert ticks.maximum >= 41.2
    diffs = np.diff(ticks.values)
    assert np.allclose(diffs, ticks.step)


def test_nice_ticks_no_float_noise():
    ticks = nice_ticks(0, 1)
    assert 0.6 in ticks.values


def test_nice_ticks_swaps_reversed_bounds():
    assert nice_ticks(20, 0) == nice_ticks(0, 20)


def test_nice_ticks_degenerate_zero():
    ticks = nice_ticks(0, 0)
    assert ticks.minimum == 0
    assert ticks.maximum == 1


def test_nice_ticks_degenerate_constant():
    ticks = nice_ticks(50, 50)
    assert ticks.minimum < 50 < ticks.maximum


def test_nice_ticks_rejects_bad_input():
    with pytest.raises(ChartDataError):
        nice_ticks(0, float("inf"))
    with pytest.raises(ChartDataError):
        nice_ticks(0, 10, max_ticks=1)


def test_value_axis_includes_zero():
    ticks = value_axis([8, 12, 20])
    assert ticks.minimum == 0
    assert ticks.maximum >= 20


def test_value_axis_without_zero():
    ticks = value_axis([80, 95], include_zero=False)
    assert ticks.minimum >= 70


def test_value_axis_empty():
    with pytest.raises(ChartDataError):
        value_axis([])


def test_value_axis_rejects_non_numeric():
    with pytest.raises(ChartDataError):
        value_axis([1, "deux", 3])


def test_value_axis_subnormal_constant():
    ticks = value_axis([5e-324], include_zero=False)
    assert ticks.minimum < 5e-324 < ticks.maximum
    assert ticks.step > 0


# ---------------------------------------------------------------------------
# LinearScale
# ---------------------------------------------------------------------------

def test_linear_scale_maps_and_inverts():
    scale = LinearScale((0, 100), (0, 500))
    assert scale(50) == pytest.approx(250)
    assert scale.invert(250) == pytest.approx(50)


def test_linear_scale_arrays():
    scale = LinearScale((0, 10), (1, 0))
    out = scale(np.array([0, 5, 10]))
    assert np.allclose(out, [1, 0.5, 0])


def test_linear_scale_zero_width_domain():
    scale = LinearScale((3, 3), (0, 10))
    assert scale(3) == 5
    assert np.allclose(scale([1, 2]), [5, 5])


# ---------------------------------------------------------------------------
# plot_margins
# ---------------------------------------------------------------------------

def test_plot_margins_grow_with_decorations():
    bare = plot_margins(show_legend=False)
    full = plot_margins("Title", "X", "Y", show_legend=True)
    assert full["t"] > bare["t"]
    assert full["b"] > bare["b"]
    assert full["l"] > bare["l"]


def test_plot_margins_side_legend():
    assert plot_margins(show_legend=True, horizontal_legend=False)["r"] > plot_margins(show_legend=False)["r"]
