"""Recommended spacing per backing category and distribution along a run."""

from __future__ import annotations

import logging
import math
from typing import Dict, List

from ..logging_utils import apply_debug_logging
from ..types import BackingCategory, Point, Spacing
from .geometry import _segment_delta

logger = logging.getLogger(__name__)

DEFAULT_SPACING = Spacing(horizontal=16.0, vertical=16.0)

SPACING_BY_CATEGORY: Dict[BackingCategory, Spacing] = {
    BackingCategory.TWO_BY_FOUR: Spacing(16.0, 16.0),
    BackingCategory.TWO_BY_SIX: Spacing(16.0, 16.0),
    BackingCategory.TWO_BY_EIGHT: Spacing(24.0, 24.0),
    BackingCategory.TWO_BY_TEN: Spacing(24.0, 24.0),
    BackingCategory.PLYWOOD_3_4: Spacing(24.0, 24.0),
    BackingCategory.STEEL_PLATE: Spacing(12.0, 12.0),
    BackingCategory.BLOCKING: Spacing(8.0, 8.0),
}


def optimal_spacing(category: object) -> Spacing:
    """Return the on-center spacing for ``category``.

    Accepts a :class:`BackingCategory` or its text value; anything that does
    not name a known category gets :data:`DEFAULT_SPACING`.
    """

    try:
        key = BackingCategory.parse(category)
    except ValueError:
        return DEFAULT_SPACING
    return SPACING_BY_CATEGORY.get(key, DEFAULT_SPACING)


def distribute_along_segment(
    start: Point,
    end: Point,
    desired_count: int,
    category: object,
) -> List[Point]:
    """Spread up to ``desired_count`` points from ``start`` to ``end``.

    The count is capped so neighbouring points are never closer than the
    category's spacing. Both endpoints are included whenever two or more
    points fit; a cap of one (or a non-positive request) yields ``[start]``.
    """

    spacing = optimal_spacing(category)
    dx, dy, length = _segment_delta(start, end)
    step = max(spacing.horizontal, spacing.vertical)
    count = min(int(desired_count), math.floor(length / step) + 1)

    if count <= 1:
        return [Point(start.x, start.y)]
    return [
        Point(start.x + dx * i / (count - 1), start.y + dy * i / (count - 1))
        for i in range(count)
    ]


apply_debug_logging(globals(), logger=logger)


__all__ = [
    "DEFAULT_SPACING",
    "SPACING_BY_CATEGORY",
    "distribute_along_segment",
    "optimal_spacing",
]
