from backing_layout import Dimensions, Location, Placement, PlacementConfig, Point
from backing_layout.spatial import alignment_guides, suggest_alignment


def _placement(pid, x, y, w=10.0, h=10.0):
    return Placement(pid, Location(x, y), Dimensions(w, h, 1.5))


def test_suggestions_sorted_by_residual_distance():
    mover = _placement("m", 3.0, 40.0)
    other = _placement("o", 0.0, 0.0, 20.0, 20.0)

    suggestions = suggest_alignment(mover, [other])

    assert [s.kind for s in suggestions] == ["center_h", "left", "right", "bottom", "center_v", "top"]
    assert [s.distance for s in suggestions] == [2.0, 3.0, 7.0, 30.0, 35.0, 40.0]
    by_kind = {s.kind: s.position for s in suggestions}
    assert by_kind == {
        "left": Point(0.0, 40.0),
        "right": Point(10.0, 40.0),
        "top": Point(3.0, 0.0),
        "bottom": Point(3.0, 10.0),
        "center_h": Point(5.0, 40.0),
        "center_v": Point(3.0, 5.0),
    }
    assert {s.target_id for s in suggestions} == {"o"}


def test_mover_is_skipped_among_others():
    mover = _placement("m", 3.0, 40.0)
    other = _placement("o", 0.0, 0.0, 20.0, 20.0)

    assert len(suggest_alignment(mover, [mover, other])) == 6


def test_limit_truncates_ranked_list():
    mover = _placement("m", 3.0, 40.0)
    others = [_placement("o1", 0.0, 0.0), _placement("o2", 50.0, 50.0)]

    assert len(suggest_alignment(mover, others)) == 10
    assert len(suggest_alignment(mover, others, limit=3)) == 3
    assert len(suggest_alignment(mover, others, config=PlacementConfig(alignment_limit=None))) == 12


def test_no_others_means_no_suggestions():
    assert suggest_alignment(_placement("m", 0.0, 0.0), []) == []


def test_guides_for_shared_center_and_left_edge():
    mover = _placement("m", 0.0, 0.0)
    other = _placement("o", 0.0, 100.0)

    guides = alignment_guides(mover, [other], 12.0)

    assert [(g.orientation, g.position) for g in guides] == [("vertical", 5.0), ("vertical", 0.0)]
    center_guide, edge_guide = guides
    assert center_guide.start == Point(5.0, -45.0)
    assert center_guide.end == Point(5.0, 155.0)
    assert edge_guide.start == Point(0.0, -20.0)
    assert edge_guide.end == Point(0.0, 130.0)


def test_no_guides_when_nothing_lines_up():
    mover = _placement("m", 0.0, 0.0)
    other = _placement("o", 200.0, 300.0)

    assert alignment_guides(mover, [other, mover], 12.0) == []
