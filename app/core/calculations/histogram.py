from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
import pandas as pd

from app.core.data import ChartDataError, finite_values

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistogramBin:
    start: float
    end: float
    count: int

    @property
    def center(self) -> float:
        return (self.start + self.end) / 2

    @property
    def width(self) -> float:
        return self.end - self.start


def compute_bins(values, bin_count: int) -> list[HistogramBin]:
    """
    Equal-width bins over [min, max] of values.

    Every bin is half-open except the last, which also counts the maximum,
    so the counts always add up to len(values).
    """
    if isinstance(bin_count, bool) or not isinstance(bin_count, (int, np.integer)):
        raise ChartDataError(f"bin_count must be an integer, got {bin_count!r}")
    if bin_count < 1:
        raise ChartDataError(f"bin_count must be >= 1, got {bin_count}")

    data = finite_values(values, "Histogram values")
    if data.size == 0:
        raise ChartDataError("A histogram needs at least one value")

    lo, hi = float(data.min()), float(data.max())
    if lo == hi:
        logger.debug("Constant histogram sample (%s), using a unit range", lo)
        lo, hi = lo - 0.5, hi + 0.5

    counts, edges = np.histogram(data, bins=int(bin_count), range=(lo, hi))
    return [
        HistogramBin(start=float(edges[i]), end=float(edges[i + 1]), count=int(counts[i]))
        for i in range(len(counts))
    ]


def bins_to_frame(bins: list[HistogramBin]) -> pd.DataFrame:
    """Tabular view of bins, one row per bin."""
    last = len(bins) - 1
    rows = []
    for i, b in enumerate(bins):
        closing = "]" if i == last else ")"
        rows.append({
            "Range": f"[{b.start:g}, {b.end:g}{closing}",
            "Start": b.start,
            "End": b.end,
            "Count": b.count,
        })
    return pd.DataFrame(rows, columns=["Range", "Start", "End", "Count"])
