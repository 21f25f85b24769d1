"""Axis-aligned overlap checks between placements."""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from ..logging_utils import apply_debug_logging
from ..types import Collision, Placement

logger = logging.getLogger(__name__)


def check_collisions(candidate: Placement, others: Sequence[Placement]) -> Collision:
    """Report the placements in ``others`` that overlap ``candidate``.

    ``overlap_area`` is the sum of the pairwise intersection areas. Where
    three or more placements overlap the same region that region is counted
    once per pair; the value ranks severity, it is not the union area.
    Rectangles that only touch along an edge do not collide, and an entry
    sharing the candidate's id is skipped.
    """

    bounds = candidate.bounds
    overlapping: List[str] = []
    total_area = 0.0
    for other in others:
        if other.id == candidate.id:
            continue
        other_bounds = other.bounds
        if bounds.overlaps(other_bounds):
            overlapping.append(other.id)
            total_area += bounds.overlap_area(other_bounds)
    return Collision(overlapping_ids=tuple(overlapping), overlap_area=total_area)


def collision_pairs(placements: Sequence[Placement]) -> List[Tuple[str, str, float]]:
    """Every overlapping pair ``(first_id, second_id, area)`` in input order."""

    pairs: List[Tuple[str, str, float]] = []
    for i, first in enumerate(placements):
        first_bounds = first.bounds
        for second in placements[i + 1 :]:
            if second.id == first.id:
                continue
            second_bounds = second.bounds
            if first_bounds.overlaps(second_bounds):
                pairs.append((first.id, second.id, first_bounds.overlap_area(second_bounds)))
    if pairs:
        logger.info("Found %d overlapping placement pair(s)", len(pairs))
    return pairs


apply_debug_logging(globals(), logger=logger)


__all__ = ["check_collisions", "collision_pairs"]
