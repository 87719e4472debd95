from __future__ import annotations

import numpy as np

from app.core.data import ChartDataError


def stack_values(matrix) -> tuple[np.ndarray, tuple[float, float]]:
    """
    Bar bases for stacked bars.

    Args:
        matrix: values shaped (n_series, n_categories).

    Returns:
        bases: same shape as matrix; where each bar starts.
        extent: (lowest, highest) stack edge, zero included.

    Positive values stack upward from zero and negative values downward,
    each in series order, so mixed-sign columns never overlap.
    """
    values = np.asarray(matrix, dtype=float)
    if values.ndim != 2:
        raise ChartDataError(f"Stacking needs a 2D matrix, got shape {values.shape}")
    if not np.all(np.isfinite(values)):
        raise ChartDataError("Stacked values must be finite")

    pos = np.where(values > 0, values, 0.0)
    neg = np.where(values < 0, values, 0.0)
    pos_top = np.cumsum(pos, axis=0)
    neg_bottom = np.cumsum(neg, axis=0)

    bases = np.where(values >= 0, pos_top - pos, neg_bottom - neg)

    if values.size == 0:
        return bases, (0.0, 0.0)
    lowest = float(min(0.0, neg_bottom[-1].min()))
    highest = float(max(0.0, pos_top[-1].max()))
    return bases, (lowest, highest)
