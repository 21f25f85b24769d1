"""Stateless spatial reasoning over a set of placements."""

from .alignment import alignment_guides, suggest_alignment
from .collisions import check_collisions, collision_pairs
from .geometry import project_onto_segment
from .grouping import classify_pattern, suggest_grouping
from .snapping import segment_snap_points, snap_nearby, snap_to_walls
from .spacing import DEFAULT_SPACING, SPACING_BY_CATEGORY, distribute_along_segment, optimal_spacing

__all__ = [
    "DEFAULT_SPACING",
    "SPACING_BY_CATEGORY",
    "alignment_guides",
    "check_collisions",
    "classify_pattern",
    "collision_pairs",
    "distribute_along_segment",
    "optimal_spacing",
    "project_onto_segment",
    "segment_snap_points",
    "snap_nearby",
    "snap_to_walls",
    "suggest_alignment",
    "suggest_grouping",
]
