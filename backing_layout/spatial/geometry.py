from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np

from ..types import Bounds, Placement, Point

_DENOM_EPS = 1e-12


def _centers_array(placements: Sequence[Placement]) -> np.ndarray:
    if not placements:
        return np.zeros((0, 2), dtype=float)
    return np.array([p.center.as_tuple() for p in placements], dtype=float)


def _similar_dimensions(a: Placement, b: Placement, tolerance: float) -> bool:
    da = a.dimensions
    db = b.dimensions
    return (
        abs(da.width - db.width) <= tolerance
        and abs(da.height - db.height) <= tolerance
        and abs(da.thickness - db.thickness) <= tolerance
    )


def _union_bounds(placements: Sequence[Placement]) -> Bounds:
    bounds = placements[0].bounds
    for placement in placements[1:]:
        bounds = bounds.union(placement.bounds)
    return bounds


def _line_distance(point: np.ndarray, anchor: np.ndarray, direction: np.ndarray) -> float:
    """Perpendicular distance from ``point`` to the infinite line through ``anchor``."""

    norm = float(np.hypot(direction[0], direction[1]))
    if norm <= _DENOM_EPS:
        return float(np.hypot(*(point - anchor)))
    rel = point - anchor
    return abs(float(rel[0] * direction[1] - rel[1] * direction[0])) / norm


def project_onto_segment(point: Point, start: Point, end: Point) -> Point:
    """Return the point of segment ``start``-``end`` nearest to ``point``."""

    dx = end.x - start.x
    dy = end.y - start.y
    length_sq = dx * dx + dy * dy
    if length_sq <= _DENOM_EPS:
        return Point(start.x, start.y)
    t = ((point.x - start.x) * dx + (point.y - start.y) * dy) / length_sq
    t = min(1.0, max(0.0, t))
    return Point(start.x + t * dx, start.y + t * dy)


def _segment_delta(start: Point, end: Point) -> Tuple[float, float, float]:
    dx = end.x - start.x
    dy = end.y - start.y
    return dx, dy, math.hypot(dx, dy)


__all__ = [
    "_DENOM_EPS",
    "_centers_array",
    "_line_distance",
    "_segment_delta",
    "_similar_dimensions",
    "_union_bounds",
    "project_onto_segment",
]
