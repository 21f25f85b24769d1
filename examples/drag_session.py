"""Example: drag a new backing next to existing ones and record the edit."""

from backing_layout import (
    BackingCategory,
    CoordinateMapper,
    Dimensions,
    DocumentBounds,
    HistoryManager,
    Location,
    Placement,
    Point,
    check_collisions,
    snap_nearby,
    suggest_alignment,
    suggest_grouping,
)


def _backing(pid: str, x: float, y: float) -> Placement:
    return Placement(pid, Location(x, y, 42.0), Dimensions(16.0, 8.0, 1.5), BackingCategory.TWO_BY_SIX)


def main() -> None:
    mapper = CoordinateMapper(DocumentBounds(0.0, 0.0, 240.0, 120.0))
    mapper.set_viewport(2.0, (10.0, 10.0), (800.0, 600.0))

    placements = (_backing("tv-1", 20.0, 40.0), _backing("tv-2", 44.0, 40.0))
    history = HistoryManager(placements)

    pointer = Point(132.0, 100.0)
    drop = mapper.viewport_to_document(pointer)
    snap = snap_nearby(drop, placements, threshold=4.0)
    print(f"Pointer {pointer.as_tuple()} -> document {drop.as_tuple()}")
    print(f"Snap: snapped={snap.snapped} kind={snap.kind} target={snap.target_id} at {snap.position.as_tuple()}")

    candidate = _backing("tv-3", snap.position.x, snap.position.y)
    for suggestion in suggest_alignment(candidate, placements, limit=3):
        print(f"Align {suggestion.kind} with {suggestion.target_id}: distance {suggestion.distance:.2f}")

    aligned = candidate.moved_to(68.0, 40.0)
    collision = check_collisions(aligned, placements)
    print("Collision:", collision.has_collision, collision.overlap_area)

    history.commit(placements + (aligned,), "add", "Add Backing")
    for group in suggest_grouping(history.state):
        print(f"Group {group.pattern}: {', '.join(group.member_ids)}")

    history.undo()
    print("After undo:", [p.id for p in history.state], "can redo:", history.can_redo)


if __name__ == "__main__":
    main()
