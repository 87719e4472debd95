from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from app.core.data import ChartDataError, finite_values

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AxisTicks:
    minimum: float
    maximum: float
    step: float
    values: tuple[float, ...]


def nice_number(value: float, round_: bool) -> float:
    """
    Heckbert's "nice number": 1, 2, 5 or 10 times a power of ten.

    With round_=True the closest nice number is returned, otherwise the
    smallest nice number not below value.
    """
    if value <= 0 or not math.isfinite(value):
        raise ChartDataError(f"nice_number needs a positive finite value, got {value}")
    exponent = math.floor(math.log10(value))
    fraction = value / 10 ** exponent

    if round_:
        if fraction < 1.5:
            nice = 1
        elif fraction < 3:
            nice = 2
        elif fraction < 7:
            nice = 5
        else:
            nice = 10
    else:
        if fraction <= 1:
            nice = 1
        elif fraction <= 2:
            nice = 2
        elif fraction <= 5:
            nice = 5
        else:
            nice = 10
    return nice * 10 ** exponent


def _decimals(step: float) -> int:
    return max(0, -math.floor(math.log10(step)))


def nice_ticks(lo: float, hi: float, max_ticks: int = 6) -> AxisTicks:
    """Round, evenly spaced tick values covering [lo, hi]."""
    if max_ticks < 2:
        raise ChartDataError(f"max_ticks must be >= 2, got {max_ticks}")
    if not (math.isfinite(lo) and math.isfinite(hi)):
        raise ChartDataError(f"Axis bounds must be finite, got [{lo}, {hi}]")
    if lo > hi:
        lo, hi = hi, lo
    if lo == hi:
        logger.debug("Degenerate axis range [%s, %s], widening", lo, hi)
        if lo == 0:
            lo, hi = 0.0, 1.0
        else:
            # Subnormal constants underflow to a zero pad
            pad = abs(lo) * 0.1 or 0.5
            lo, hi = lo - pad, hi + pad

    span = nice_number(hi - lo, round_=False)
    step = nice_number(span / (max_ticks - 1), round_=True)
    nice_min = math.floor(lo / step) * step
    nice_max = math.ceil(hi / step) * step

    decimals = _decimals(step)
    count = int(round((nice_max - nice_min) / step)) + 1
    values = np.round(nice_min + step * np.arange(count), decimals)
    return AxisTicks(
        minimum=round(nice_min, decimals),
        maximum=round(nice_max, decimals),
        step=step,
        values=tuple(float(v) for v in values),
    )


def value_axis(values, include_zero: bool = True, max_ticks: int = 6) -> AxisTicks:
    """Ticks for a value axis spanning all of `values` (and zero, if asked)."""
    arr = finite_values(values, "Axis values")
    if arr.size == 0:
        raise ChartDataError("Cannot build an axis without values")
    lo, hi = float(arr.min()), float(arr.max())
    if include_zero:
        lo, hi = min(lo, 0.0), max(hi, 0.0)
    return nice_ticks(lo, hi, max_ticks=max_ticks)


class LinearScale:
    """Linear mapping from a data domain onto an output range."""

    def __init__(self, domain: tuple[float, float], range_: tuple[float, float] = (0.0, 1.0)):
        self.domain = (float(domain[0]), float(domain[1]))
        self.range = (float(range_[0]), float(range_[1]))

    def __repr__(self):
        return f"LinearScale(domain={self.domain}, range_={self.range})"

    @property
    def _span(self) -> float:
        return self.domain[1] - self.domain[0]

    def __call__(self, value):
        r0, r1 = self.range
        if self._span == 0:
            mid = (r0 + r1) / 2
            if np.ndim(value):
                return np.full(np.shape(value), mid)
            return mid
        t = (np.asarray(value, dtype=float) - self.domain[0]) / self._span
        out = r0 + t * (r1 - r0)
        return float(out) if np.ndim(out) == 0 else out

    def invert(self, value):
        r0, r1 = self.range
        if r1 == r0:
            raise ChartDataError("Cannot invert a scale with an empty range")
        t = (np.asarray(value, dtype=float) - r0) / (r1 - r0)
        out = self.domain[0] + t * self._span
        return float(out) if np.ndim(out) == 0 else out


def plot_margins(
    title: str | None = None,
    x_axis_title: str | None = None,
    y_axis_title: str | None = None,
    show_legend: bool = True,
    horizontal_legend: bool = True,
) -> dict:
    """Pixel margins around the plot area, sized for the decorations present."""
    margins = dict(l=40, r=24, t=24, b=40)
    if title:
        margins["t"] += 40
    if x_axis_title:
        margins["b"] += 28
    if y_axis_title:
        margins["l"] += 32
    if show_legend:
        if horizontal_legend:
            margins["b"] += 40
        else:
            margins["r"] += 120
    return margins
