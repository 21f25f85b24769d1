import argparse
import logging
from typing import Optional, Sequence, Set

from backing_layout import (
    Point,
    collision_pairs,
    load_placements,
    snap_nearby,
    suggest_grouping,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_point(value: Optional[str]) -> Optional[Point]:
    if not value:
        return None
    parts = [part.strip() for part in value.split(",") if part.strip()]
    if len(parts) != 2:
        logger.warning("Snap point requires two comma separated numbers, got %r", value)
        return None
    try:
        return Point(float(parts[0]), float(parts[1]))
    except ValueError:
        logger.warning("Snap point %r is not numeric", value)
        return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Inspect a set of backing placements")
    parser.add_argument("path", help="Path to a JSON list of placement records")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--snap",
        help="Report the snap target for a document point, e.g. 12,30",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        help="Snap threshold in document units (default: configured value)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        placements = load_placements(args.path)
    except (OSError, ValueError) as exc:
        logger.error("Could not load placements: %s", exc)
        return 1

    collided: Set[str] = set()
    for first_id, second_id, area in collision_pairs(placements):
        collided.update((first_id, second_id))
        logger.warning("Placement %s overlaps %s (area=%.6g)", first_id, second_id, area)
    logger.info("%d of %d placement(s) collide", len(collided), len(placements))

    groups = suggest_grouping(placements)
    for idx, group in enumerate(groups):
        logger.info(
            "Group %d: %s %s x%d [%s] center=(%.6g, %.6g)",
            idx,
            group.pattern,
            group.category.value,
            group.count,
            ", ".join(group.member_ids),
            group.center.x,
            group.center.y,
        )
    if not groups:
        logger.info("No grouping suggestions")

    point = _parse_point(args.snap)
    if point is not None:
        result = snap_nearby(point, placements, args.threshold)
        if result.snapped:
            logger.info(
                "Snap (%.6g, %.6g) -> %s of %s at (%.6g, %.6g), distance=%.6g",
                point.x,
                point.y,
                result.kind,
                result.target_id,
                result.position.x,
                result.position.y,
                result.distance,
            )
        else:
            logger.info("Snap (%.6g, %.6g) -> no target", point.x, point.y)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
