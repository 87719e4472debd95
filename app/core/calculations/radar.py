from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from app.core.calculations.scaling import LinearScale, nice_ticks
from app.core.data import ChartDataError, DataSeries


@dataclass(frozen=True)
class RadarPolygon:
    name: str
    color: str
    values: tuple[float, ...]
    xs: tuple[float, ...]
    ys: tuple[float, ...]


@dataclass(frozen=True)
class RadarLayout:
    categories: tuple[str, ...]
    angles: tuple[float, ...]
    scale: LinearScale
    ring_values: tuple[float, ...]
    rings: tuple[tuple[tuple[float, ...], tuple[float, ...]], ...]
    spokes: tuple[tuple[float, float], ...]
    label_anchors: tuple[tuple[float, float], ...]
    polygons: tuple[RadarPolygon, ...]


def radar_angles(n: int) -> np.ndarray:
    """Spoke angles in degrees, clockwise from 12 o'clock."""
    return np.arange(n) * (360.0 / n)


def _closed_ring(angles: np.ndarray, radii) -> tuple[tuple[float, ...], tuple[float, ...]]:
    theta = np.radians(angles)
    r = np.broadcast_to(np.asarray(radii, dtype=float), theta.shape)
    xs = r * np.sin(theta)
    ys = r * np.cos(theta)
    return tuple(np.append(xs, xs[0]).tolist()), tuple(np.append(ys, ys[0]).tolist())


def radar_layout(
    series: list[DataSeries],
    categories: list[str],
    max_value: float | None = None,
    levels: int = 5,
    label_radius: float = 1.15,
) -> RadarLayout:
    """
    Geometry of a radar chart in a unit circle.

    Values are scaled from [0, nice max] onto radius [0, 1]; the web rings sit
    on the nice tick values of that range.
    """
    if len(categories) < 3:
        raise ChartDataError(f"A radar chart needs at least 3 categories, got {len(categories)}")
    if not series:
        raise ChartDataError("A radar chart needs at least one data series")
    for s in series:
        if len(s) != len(categories):
            raise ChartDataError(
                f"Series {s.name!r} has {len(s)} points for {len(categories)} categories"
            )
        if any(y < 0 for y in s.ys):
            raise ChartDataError(f"Series {s.name!r} has negative values")

    peak = max(max(s.ys) for s in series)
    if max_value is not None:
        if max_value <= 0:
            raise ChartDataError(f"max_value must be positive, got {max_value}")
        peak = max(peak, max_value)
    ticks = nice_ticks(0.0, peak if peak > 0 else 1.0, max_ticks=levels + 1)
    scale = LinearScale((0.0, ticks.maximum), (0.0, 1.0))

    angles = radar_angles(len(categories))
    ring_values = tuple(v for v in ticks.values if v > 0)
    rings = tuple(_closed_ring(angles, scale(v)) for v in ring_values)

    theta = np.radians(angles)
    spokes = tuple(zip(np.sin(theta).tolist(), np.cos(theta).tolist()))
    label_anchors = tuple((x * label_radius, y * label_radius) for x, y in spokes)

    polygons = []
    for s in series:
        xs, ys = _closed_ring(angles, scale(np.asarray(s.ys)))
        polygons.append(RadarPolygon(
            name=s.name, color=s.color, values=tuple(s.ys), xs=xs, ys=ys,
        ))

    return RadarLayout(
        categories=tuple(categories),
        angles=tuple(angles.tolist()),
        scale=scale,
        ring_values=ring_values,
        rings=rings,
        spokes=spokes,
        label_anchors=label_anchors,
        polygons=tuple(polygons),
    )
