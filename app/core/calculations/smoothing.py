from __future__ import annotations

import numpy as np

from app.core.data import ChartDataError


def smooth_curve(xs, ys, samples_per_segment: int = 16) -> tuple[np.ndarray, np.ndarray]:
    """
    Smooth a polyline with one cubic Bézier per segment.

    Both control points sit at the horizontal midpoint of the segment, at the
    height of the nearest end point, so every input point is kept and the
    curve never overshoots the y range of its segment.

    Returns:
        (xs, ys) numpy arrays with samples_per_segment points per segment
        plus the final input point.
    """
    x = np.asarray(xs, dtype=float)
    y = np.asarray(ys, dtype=float)
    if x.shape != y.shape:
        raise ChartDataError(f"x and y lengths differ ({x.size} vs {y.size})")
    if samples_per_segment < 1:
        raise ChartDataError(f"samples_per_segment must be >= 1, got {samples_per_segment}")
    if x.size < 2:
        return x, y

    t = np.linspace(0.0, 1.0, samples_per_segment, endpoint=False)[:, None]
    x0, x1 = x[:-1], x[1:]
    y0, y1 = y[:-1], y[1:]
    xm = (x0 + x1) / 2

    # Bernstein weights for P0, C1, C2, P3
    b0 = (1 - t) ** 3
    b1 = 3 * (1 - t) ** 2 * t
    b2 = 3 * (1 - t) * t ** 2
    b3 = t ** 3

    bx = b0 * x0 + b1 * xm + b2 * xm + b3 * x1
    by = b0 * y0 + b1 * y0 + b2 * y1 + b3 * y1

    # Columns are segments; flatten segment by segment
    out_x = np.append(bx.T.ravel(), x[-1])
    out_y = np.append(by.T.ravel(), y[-1])
    return out_x, out_y
