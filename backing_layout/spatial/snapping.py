"""Snap a dragged point onto salient features of nearby placements."""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..config import PlacementConfig, get_placement_config
from ..logging_utils import apply_debug_logging
from ..types import Placement, Point, SnapKind, SnapResult, WallSegment
from .geometry import _segment_delta, project_onto_segment

logger = logging.getLogger(__name__)

# order matters: ties resolve to the earliest candidate
_CANDIDATE_KINDS: Tuple[SnapKind, ...] = (
    "edge",
    "edge",
    "edge",
    "edge",
    "center",
    "corner",
    "corner",
    "corner",
    "corner",
)


def _snap_candidates(placement: Placement) -> List[Tuple[float, float]]:
    b = placement.bounds
    cx, cy = b.center_x, b.center_y
    return [
        (b.left, cy),
        (b.right, cy),
        (cx, b.top),
        (cx, b.bottom),
        (cx, cy),
        (b.left, b.top),
        (b.right, b.top),
        (b.left, b.bottom),
        (b.right, b.bottom),
    ]


def snap_nearby(
    point: Point,
    placements: Sequence[Placement],
    threshold: Optional[float] = None,
    *,
    config: Optional[PlacementConfig] = None,
) -> SnapResult:
    """Snap ``point`` to the nearest edge midpoint, center or corner.

    Every placement contributes nine candidates. The nearest candidate whose
    distance does not exceed ``threshold`` wins; equal distances resolve to
    the placement that comes first in ``placements``. Without a qualifying
    candidate the result is unsnapped and carries ``point`` unchanged.
    """

    if threshold is None:
        threshold = (config or get_placement_config()).snap_threshold
    if not placements:
        return SnapResult(snapped=False, position=point)

    candidates = np.array([_snap_candidates(p) for p in placements], dtype=float)
    deltas = candidates - np.array([point.x, point.y], dtype=float)
    distances = np.hypot(deltas[..., 0], deltas[..., 1]).ravel()

    best = int(np.argmin(distances))
    best_distance = float(distances[best])
    if not best_distance <= threshold:
        return SnapResult(snapped=False, position=point)

    owner, slot = divmod(best, len(_CANDIDATE_KINDS))
    x, y = candidates[owner, slot]
    return SnapResult(
        snapped=True,
        position=Point(float(x), float(y)),
        kind=_CANDIDATE_KINDS[slot],
        target_id=placements[owner].id,
        distance=best_distance,
    )


def segment_snap_points(
    walls: Sequence[WallSegment],
    interval: Optional[float] = None,
    *,
    config: Optional[PlacementConfig] = None,
) -> List[Point]:
    """Evenly spaced snap points along each wall, endpoints included."""

    if interval is None:
        interval = (config or get_placement_config()).wall_snap_interval
    points: List[Point] = []
    for wall in walls:
        dx, dy, length = _segment_delta(wall.start, wall.end)
        if length <= 0.0 or not interval > 0.0:
            points.append(Point(wall.start.x, wall.start.y))
            continue
        divisions = max(1, math.ceil(length / interval))
        for i in range(divisions + 1):
            t = i / divisions
            points.append(Point(wall.start.x + dx * t, wall.start.y + dy * t))
    return points


def snap_to_walls(
    point: Point,
    walls: Sequence[WallSegment],
    threshold: Optional[float] = None,
    *,
    config: Optional[PlacementConfig] = None,
) -> SnapResult:
    """Project ``point`` onto the nearest wall within ``threshold``.

    Projections are clamped to each wall's endpoints; a zero-length wall
    offers its start point. Equal distances resolve to the earliest wall.
    """

    if threshold is None:
        threshold = (config or get_placement_config()).snap_threshold
    best: Optional[SnapResult] = None
    for wall in walls:
        projected = project_onto_segment(point, wall.start, wall.end)
        distance = math.hypot(projected.x - point.x, projected.y - point.y)
        if distance <= threshold and (best is None or distance < best.distance):
            best = SnapResult(
                snapped=True,
                position=projected,
                kind="wall",
                target_id=wall.id,
                distance=distance,
            )
    if best is None:
        return SnapResult(snapped=False, position=point)
    return best


apply_debug_logging(globals(), logger=logger)


__all__ = ["segment_snap_points", "snap_nearby", "snap_to_walls"]
