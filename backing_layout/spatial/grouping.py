"""Proximity grouping of similar placements and pattern classification."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Set

import numpy as np
from scipy.spatial import cKDTree

from ..config import PlacementConfig, get_placement_config
from ..logging_utils import apply_debug_logging
from ..types import GroupSuggestion, PatternKind, Placement
from .geometry import _DENOM_EPS, _centers_array, _line_distance, _similar_dimensions, _union_bounds

logger = logging.getLogger(__name__)


def _is_linear(centers: np.ndarray, tolerance: float) -> bool:
    if len(centers) < 3:
        return False
    anchor = centers[0]
    direction = centers[-1] - anchor
    if float(np.hypot(*direction)) <= _DENOM_EPS:
        # first and last coincide; fall back to the farthest member
        offsets = np.hypot(*(centers - anchor).T)
        direction = centers[int(np.argmax(offsets))] - anchor
    order = np.argsort((centers - anchor) @ direction, kind="stable")
    start = centers[order[0]]
    line = centers[order[-1]] - start
    return all(_line_distance(point, start, line) <= tolerance for point in centers)


def _consistent_gaps(values: np.ndarray, tolerance: float) -> bool:
    gaps = np.diff(np.sort(values))
    gaps = gaps[gaps > tolerance]
    if gaps.size == 0:
        return False
    return bool(np.all(np.abs(gaps - gaps[0]) <= tolerance))


def _is_grid(centers: np.ndarray, tolerance: float) -> bool:
    if len(centers) < 4:
        return False
    return _consistent_gaps(centers[:, 0], tolerance) and _consistent_gaps(centers[:, 1], tolerance)


def classify_pattern(centers: np.ndarray, tolerance: float) -> PatternKind:
    """Classify member centers (an ``(n, 2)`` array) as linear, grid or cluster."""

    if _is_linear(centers, tolerance):
        return "linear"
    if _is_grid(centers, tolerance):
        return "grid"
    return "cluster"


def suggest_grouping(
    placements: Sequence[Placement],
    *,
    config: Optional[PlacementConfig] = None,
) -> List[GroupSuggestion]:
    """Greedily partition ``placements`` into groups of similar neighbours.

    Seeds are visited in input order. A seed collects every unconsumed
    placement of the same category with near-equal dimensions whose center
    lies within ``grouping_radius`` of its own; the collection becomes a
    group when it reaches ``min_group_size`` members, and its members are
    not offered to later seeds. Groups are returned largest first.
    """

    cfg = config or get_placement_config()
    if len(placements) < cfg.min_group_size:
        return []

    centers = _centers_array(placements)
    tree = cKDTree(centers)
    consumed: Set[int] = set()
    groups: List[GroupSuggestion] = []

    for seed_index, seed in enumerate(placements):
        if seed_index in consumed:
            continue
        nearby = sorted(tree.query_ball_point(centers[seed_index], r=cfg.grouping_radius))
        members = [
            idx
            for idx in nearby
            if idx not in consumed
            and placements[idx].category is seed.category
            and _similar_dimensions(seed, placements[idx], cfg.dimension_tolerance)
            and float(np.hypot(*(centers[idx] - centers[seed_index]))) < cfg.grouping_radius
        ]
        if len(members) < cfg.min_group_size:
            continue

        member_placements = [placements[idx] for idx in members]
        bounds = _union_bounds(member_placements)
        groups.append(
            GroupSuggestion(
                member_ids=tuple(p.id for p in member_placements),
                pattern=classify_pattern(centers[members], cfg.pattern_tolerance),
                bounds=bounds,
                center=bounds.center,
                category=seed.category,
            )
        )
        consumed.update(members)

    groups.sort(key=lambda group: -group.count)
    logger.debug("Grouping produced %d suggestion(s) from %d placements", len(groups), len(placements))
    return groups


apply_debug_logging(globals(), logger=logger)


__all__ = ["classify_pattern", "suggest_grouping"]
