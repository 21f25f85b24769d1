import pytest

from backing_layout import Dimensions, Location, Placement
from backing_layout.spatial import check_collisions, collision_pairs


def _placement(pid, x, y, w=10.0, h=10.0):
    return Placement(pid, Location(x, y), Dimensions(w, h, 1.5))


def test_partial_overlap_reports_area():
    a = _placement("a", 0.0, 0.0)
    b = _placement("b", 5.0, 5.0)

    collision = check_collisions(a, [b])

    assert collision.has_collision
    assert collision.overlapping_ids == ("b",)
    assert collision.overlap_area == 25.0


@pytest.mark.parametrize(
    "first, second",
    [
        ((0.0, 0.0, 10.0, 10.0), (5.0, 5.0, 10.0, 10.0)),
        ((0.0, 0.0, 48.0, 24.0), (40.0, -6.0, 16.0, 16.0)),
        ((2.5, 2.5, 3.0, 3.0), (0.0, 0.0, 10.0, 10.0)),
    ],
)
def test_collision_is_symmetric(first, second):
    a = _placement("a", *first)
    b = _placement("b", *second)

    forward = check_collisions(a, [b])
    backward = check_collisions(b, [a])

    assert forward.overlapping_ids == ("b",)
    assert backward.overlapping_ids == ("a",)
    assert forward.overlap_area == pytest.approx(backward.overlap_area)


def test_touching_edges_do_not_collide():
    a = _placement("a", 0.0, 0.0)

    assert not check_collisions(a, [_placement("b", 10.0, 0.0)]).has_collision
    assert not check_collisions(a, [_placement("c", 0.0, 10.0)]).has_collision


def test_candidate_is_not_compared_with_itself():
    a = _placement("a", 0.0, 0.0)
    moved_a = a.moved_to(2.0, 2.0)

    collision = check_collisions(moved_a, [a])

    assert collision.overlapping_ids == ()
    assert collision.overlap_area == 0.0


def test_area_sums_pairwise_overlaps():
    stack = [_placement(pid, 0.0, 0.0) for pid in ("b", "c", "d")]

    collision = check_collisions(_placement("a", 0.0, 0.0), stack)

    assert collision.overlapping_ids == ("b", "c", "d")
    assert collision.overlap_area == 300.0


def test_empty_others_is_collision_free():
    collision = check_collisions(_placement("a", 0.0, 0.0), [])

    assert not collision.has_collision
    assert collision.overlap_area == 0.0


def test_collision_pairs_lists_each_pair_once():
    placements = [
        _placement("a", 0.0, 0.0),
        _placement("b", 5.0, 5.0),
        _placement("c", 100.0, 100.0),
    ]

    assert collision_pairs(placements) == [("a", "b", 25.0)]
