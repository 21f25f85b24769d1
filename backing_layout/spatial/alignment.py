"""Alignment suggestions and guide lines for a placement being dragged."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..config import PlacementConfig, get_placement_config
from ..logging_utils import apply_debug_logging
from ..types import AlignmentGuide, AlignmentSuggestion, Placement, Point

logger = logging.getLogger(__name__)

_CENTER_GUIDE_OVERHANG = 50.0
_EDGE_GUIDE_OVERHANG = 20.0


def _alignments_against(moving: Placement, other: Placement) -> List[AlignmentSuggestion]:
    mb = moving.bounds
    ob = other.bounds
    x = moving.location.x
    y = moving.location.y
    width = moving.dimensions.width
    height = moving.dimensions.height
    target = other.id
    return [
        AlignmentSuggestion("left", Point(ob.left, y), target, abs(mb.left - ob.left)),
        AlignmentSuggestion("right", Point(ob.right - width, y), target, abs(mb.right - ob.right)),
        AlignmentSuggestion("top", Point(x, ob.top), target, abs(mb.top - ob.top)),
        AlignmentSuggestion("bottom", Point(x, ob.bottom - height), target, abs(mb.bottom - ob.bottom)),
        AlignmentSuggestion(
            "center_h", Point(ob.center_x - width / 2.0, y), target, abs(mb.center_x - ob.center_x)
        ),
        AlignmentSuggestion(
            "center_v", Point(x, ob.center_y - height / 2.0), target, abs(mb.center_y - ob.center_y)
        ),
    ]


def suggest_alignment(
    moving: Placement,
    others: Sequence[Placement],
    limit: Optional[int] = None,
    *,
    config: Optional[PlacementConfig] = None,
) -> List[AlignmentSuggestion]:
    """Rank the six canonical alignments of ``moving`` against each other placement.

    Each suggestion carries the top-left position ``moving`` would occupy and
    the residual distance between the matched features. The list is sorted
    by ascending distance; equal distances keep the order of ``others``.
    ``limit`` defaults to ``PlacementConfig.alignment_limit``.
    """

    if limit is None:
        limit = (config or get_placement_config()).alignment_limit

    suggestions: List[AlignmentSuggestion] = []
    for other in others:
        if other.id == moving.id:
            continue
        suggestions.extend(_alignments_against(moving, other))

    suggestions.sort(key=lambda suggestion: suggestion.distance)
    if limit is not None:
        suggestions = suggestions[: max(limit, 0)]
    return suggestions


def alignment_guides(
    moving: Placement,
    others: Sequence[Placement],
    snap_distance: Optional[float] = None,
    *,
    config: Optional[PlacementConfig] = None,
) -> List[AlignmentGuide]:
    """Guide segments for centers and top/left edges lining up with ``moving``."""

    if snap_distance is None:
        snap_distance = (config or get_placement_config()).guide_snap_distance

    mb = moving.bounds
    guides: List[AlignmentGuide] = []
    for other in others:
        if other.id == moving.id:
            continue
        ob = other.bounds

        if abs(mb.center_y - ob.center_y) < snap_distance:
            guides.append(
                AlignmentGuide(
                    orientation="horizontal",
                    position=ob.center_y,
                    start=Point(min(mb.center_x, ob.center_x) - _CENTER_GUIDE_OVERHANG, ob.center_y),
                    end=Point(max(mb.center_x, ob.center_x) + _CENTER_GUIDE_OVERHANG, ob.center_y),
                    target_id=other.id,
                )
            )
        if abs(mb.center_x - ob.center_x) < snap_distance:
            guides.append(
                AlignmentGuide(
                    orientation="vertical",
                    position=ob.center_x,
                    start=Point(ob.center_x, min(mb.center_y, ob.center_y) - _CENTER_GUIDE_OVERHANG),
                    end=Point(ob.center_x, max(mb.center_y, ob.center_y) + _CENTER_GUIDE_OVERHANG),
                    target_id=other.id,
                )
            )
        if abs(mb.left - ob.left) < snap_distance:
            guides.append(
                AlignmentGuide(
                    orientation="vertical",
                    position=ob.left,
                    start=Point(ob.left, min(mb.top, ob.top) - _EDGE_GUIDE_OVERHANG),
                    end=Point(ob.left, max(mb.bottom, ob.bottom) + _EDGE_GUIDE_OVERHANG),
                    target_id=other.id,
                )
            )
        if abs(mb.top - ob.top) < snap_distance:
            guides.append(
                AlignmentGuide(
                    orientation="horizontal",
                    position=ob.top,
                    start=Point(min(mb.left, ob.left) - _EDGE_GUIDE_OVERHANG, ob.top),
                    end=Point(max(mb.right, ob.right) + _EDGE_GUIDE_OVERHANG, ob.top),
                    target_id=other.id,
                )
            )
    return guides


apply_debug_logging(globals(), logger=logger)


__all__ = ["alignment_guides", "suggest_alignment"]
