"""
Pie and donut geometry.

Angles are degrees measured clockwise from 12 o'clock, and coordinates are
in a unit circle centred on the origin with y pointing up.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from app.core.data import ChartDataError, PieChartSegment

OUTER_RADIUS = 1.0


@dataclass(frozen=True)
class SegmentGeometry:
    label: str
    value: float
    color: str
    percentage: float
    start_angle: float
    sweep: float
    inner_radius: float
    outer_radius: float
    offset: tuple[float, float]
    label_anchor: tuple[float, float]

    @property
    def mid_angle(self) -> float:
        return self.start_angle + self.sweep / 2

    @property
    def end_angle(self) -> float:
        return self.start_angle + self.sweep


def polar_point(angle: float, radius: float) -> tuple[float, float]:
    """Cartesian point for a clockwise-from-top angle."""
    theta = math.radians(angle)
    return radius * math.sin(theta), radius * math.cos(theta)


def pie_geometry(
    segments: list[PieChartSegment],
    start_angle: float = 0.0,
    donut: bool = False,
    hole_ratio: float = 0.55,
    selected: int | None = None,
    explode_offset: float = 0.08,
) -> list[SegmentGeometry]:
    """Lay segments out contiguously around the circle, in input order."""
    if not segments:
        raise ChartDataError("A pie chart needs at least one segment")
    if not 0 <= hole_ratio < 1:
        raise ChartDataError(f"hole_ratio must be in [0, 1), got {hole_ratio}")
    if selected is not None and not 0 <= selected < len(segments):
        raise ChartDataError(f"Selected segment {selected} out of range (0..{len(segments) - 1})")

    total = sum(s.value for s in segments)
    if total <= 0:
        raise ChartDataError("Pie chart total must be positive")

    inner = hole_ratio * OUTER_RADIUS if donut else 0.0
    # Labels sit in the middle of the ring, or two thirds out on a full pie
    label_radius = (inner + OUTER_RADIUS) / 2 if donut else OUTER_RADIUS * 0.65

    geometry = []
    angle = start_angle
    for i, seg in enumerate(segments):
        fraction = seg.value / total
        sweep = 360.0 * fraction
        mid = angle + sweep / 2

        if i == selected:
            offset = polar_point(mid, explode_offset)
        else:
            offset = (0.0, 0.0)

        lx, ly = polar_point(mid, label_radius)
        geometry.append(SegmentGeometry(
            label=seg.label,
            value=seg.value,
            color=seg.color,
            percentage=100.0 * fraction,
            start_angle=angle,
            sweep=sweep,
            inner_radius=inner,
            outer_radius=OUTER_RADIUS,
            offset=offset,
            label_anchor=(lx + offset[0], ly + offset[1]),
        ))
        angle += sweep

    return geometry


def arc_outline(geometry: SegmentGeometry, steps_per_turn: int = 180) -> tuple[np.ndarray, np.ndarray]:
    """
    Closed outline of a segment: a wedge, or a ring sector when the segment
    has an inner radius. The first point is repeated at the end.
    """
    steps = max(2, int(math.ceil(steps_per_turn * geometry.sweep / 360.0)) + 1)
    theta = np.radians(np.linspace(geometry.start_angle, geometry.end_angle, steps))
    dx, dy = geometry.offset

    outer_x = geometry.outer_radius * np.sin(theta) + dx
    outer_y = geometry.outer_radius * np.cos(theta) + dy

    if geometry.inner_radius > 0:
        back = theta[::-1]
        inner_x = geometry.inner_radius * np.sin(back) + dx
        inner_y = geometry.inner_radius * np.cos(back) + dy
    else:
        inner_x = np.array([dx])
        inner_y = np.array([dy])

    xs = np.concatenate([outer_x, inner_x, outer_x[:1]])
    ys = np.concatenate([outer_y, inner_y, outer_y[:1]])
    return xs, ys
