"""
Value records fed to the chart widgets.

Provides:
  - DataPoint / DataSeries for line, bar and radar charts
  - PieChartSegment for pie charts
  - series_to_frame() for tabular views of a list of series
  - finite_values() for numeric sequences handed to the calculations
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field

import numpy as np
import pandas as pd


_HEX_COLOR = re.compile(r"^#(?:[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")


class ChartDataError(ValueError):
    """Raised when chart input cannot be laid out or drawn."""


def _check_finite(value, what: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ChartDataError(f"{what} must be a number, got {value!r}") from None
    if not math.isfinite(number):
        raise ChartDataError(f"{what} must be finite, got {value!r}")
    return number


def finite_values(values, what: str) -> np.ndarray:
    """1-D float array of `values`, rejecting anything non-numeric or non-finite."""
    try:
        data = np.asarray(list(values), dtype=float)
    except (TypeError, ValueError) as e:
        raise ChartDataError(f"{what} must be numbers: {e}") from None
    if data.ndim != 1:
        raise ChartDataError(f"{what} must be a flat sequence of numbers")
    if not np.all(np.isfinite(data)):
        raise ChartDataError(f"{what} must be finite")
    return data


def _check_color(color: str) -> str:
    if not isinstance(color, str) or not _HEX_COLOR.match(color):
        raise ChartDataError(f"Invalid color {color!r} (expected #RRGGBB or #AARRGGBB)")
    return color.upper()


@dataclass(frozen=True)
class DataPoint:
    x: float
    y: float
    label: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "x", _check_finite(self.x, "x"))
        object.__setattr__(self, "y", _check_finite(self.y, "y"))

    @property
    def display_label(self) -> str:
        if self.label is not None:
            return self.label
        return f"{self.x:g}"


@dataclass(frozen=True)
class DataSeries:
    name: str
    color: str
    points: tuple[DataPoint, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "color", _check_color(self.color))
        object.__setattr__(self, "points", tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)

    @property
    def xs(self) -> list[float]:
        return [p.x for p in self.points]

    @property
    def ys(self) -> list[float]:
        return [p.y for p in self.points]

    @property
    def labels(self) -> list[str]:
        return [p.display_label for p in self.points]


@dataclass(frozen=True)
class PieChartSegment:
    label: str
    value: float
    color: str

    def __post_init__(self):
        value = _check_finite(self.value, f"Segment {self.label!r} value")
        if value < 0:
            raise ChartDataError(f"Segment {self.label!r} value must be >= 0, got {value}")
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "color", _check_color(self.color))


def series_to_frame(series: list[DataSeries]) -> pd.DataFrame:
    """
    One row per point label, one column per series.

    Labels are taken in order of first appearance, so series sharing the same
    x categories line up on the same row. Columns follow the order of
    `series`, one per series even when two of them share a name.
    """
    if not series:
        raise ChartDataError("At least one data series is required")

    by_label: list[dict[str, float]] = []
    order: list[str] = []
    for s in series:
        labels = s.labels
        if len(set(labels)) != len(labels):
            repeated = sorted({lbl for lbl in labels if labels.count(lbl) > 1})
            raise ChartDataError(f"Series {s.name!r} repeats point labels {repeated}")
        by_label.append(dict(zip(labels, s.ys)))
        for label in labels:
            if label not in order:
                order.append(label)

    rows = [[values.get(label, float("nan")) for values in by_label] for label in order]
    return pd.DataFrame(
        rows,
        index=pd.Index(order, name="Label"),
        columns=[s.name for s in series],
        dtype=float,
    )
