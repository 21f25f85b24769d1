import math

import pytest

from backing_layout import CoordinateMapper, DocumentBounds, Point, Viewport


def _mapper(bounds=None, zoom=1.0, pan=(0.0, 0.0), size=(800.0, 600.0), **kwargs):
    mapper = CoordinateMapper(bounds or DocumentBounds(0.0, 0.0, 240.0, 120.0), **kwargs)
    mapper.set_viewport(zoom, pan, size)
    return mapper


def _close(a: Point, b: Point, tol: float = 1e-6) -> bool:
    return math.isclose(a.x, b.x, abs_tol=tol) and math.isclose(a.y, b.y, abs_tol=tol)


def test_document_point_maps_through_zoom_then_pan():
    mapper = _mapper(zoom=2.0, pan=(10.0, 10.0))

    view = mapper.document_to_viewport(Point(60.0, 30.0))

    assert _close(view, Point(130.0, 70.0))
    assert _close(mapper.viewport_to_document(view), Point(60.0, 30.0))


@pytest.mark.parametrize(
    "point",
    [
        Point(0.0, 0.0),
        Point(-50.0, 20.0),
        Point(123.456, -789.01),
        Point(1e5, 3.25),
    ],
)
def test_round_trip_recovers_document_point(point):
    mapper = _mapper(
        bounds=DocumentBounds(-50.0, 20.0, 300.0, 200.0),
        zoom=0.37,
        pan=(-13.5, 42.25),
    )

    assert _close(mapper.viewport_to_document(mapper.document_to_viewport(point)), point)


def test_degenerate_bounds_fall_back_to_identity():
    mapper = CoordinateMapper(DocumentBounds(0.0, 0.0, 0.0, 120.0))
    mapper.set_viewport(3.0, (5.0, 5.0))

    to_view = mapper.document_to_viewport(Point(7.0, 9.0))
    to_doc = mapper.viewport_to_document(Point(7.0, 9.0))

    assert to_view == Point(7.0, 9.0)
    assert to_doc == Point(7.0, 9.0)
    assert all(math.isfinite(v) for v in (*to_view.as_tuple(), *to_doc.as_tuple()))


def test_reference_frame_change_does_not_touch_earlier_results():
    mapper = _mapper(zoom=2.0, pan=(10.0, 10.0))
    before = mapper.document_to_viewport(Point(60.0, 30.0))

    mapper.set_viewport(4.0, (0.0, 0.0))
    mapper.set_document_bounds(DocumentBounds(10.0, 10.0, 100.0, 100.0))

    assert before == Point(130.0, 70.0)
    assert _close(mapper.document_to_viewport(Point(60.0, 30.0)), Point(200.0, 80.0))


def test_viewport_rejects_non_positive_zoom():
    with pytest.raises(ValueError):
        Viewport(zoom=0.0)
    mapper = _mapper()
    with pytest.raises(ValueError):
        mapper.set_viewport(-1.0, (0.0, 0.0))
    assert mapper.scale_factor() == 1.0


def test_set_viewport_keeps_size_when_omitted():
    mapper = _mapper(size=(320.0, 200.0))
    mapper.set_viewport(1.5, Point(1.0, 2.0))

    assert mapper.viewport.size == (320.0, 200.0)
    assert mapper.scale_factor() == 1.5


def test_snap_to_document_grid_rounds_each_axis():
    mapper = _mapper()

    assert mapper.snap_to_document_grid(Point(13.2, -7.9), 4.0) == Point(12.0, -8.0)
    assert mapper.snap_to_document_grid(Point(13.2, -7.9), 0.0) == Point(13.2, -7.9)


def test_snap_to_grid_honours_units_per_inch():
    mapper = _mapper(units_per_inch=72.0)

    assert mapper.snap_to_document_grid(Point(100.0, 50.0), 1.0) == Point(72.0, 72.0)
    assert mapper.inches_to_document_units(2.0) == 144.0
    assert mapper.document_units_to_inches(36.0) == 0.5


def test_zoom_invariant_overlay_sizes():
    mapper = _mapper(zoom=4.0)
    assert mapper.line_thickness(2.0) == 0.5
    assert mapper.font_size(12.0) == 8.0

    mapper.set_viewport(0.5, (0.0, 0.0))
    assert mapper.font_size(12.0) == 24.0


def test_grid_lines_cover_visible_viewport():
    mapper = _mapper(bounds=DocumentBounds(0.0, 0.0, 1000.0, 1000.0), size=(100.0, 50.0))

    lines = mapper.grid_lines(25.0)

    assert lines.vertical == pytest.approx((0.0, 25.0, 50.0, 75.0, 100.0))
    assert lines.horizontal == pytest.approx((0.0, 25.0, 50.0))


def test_grid_lines_follow_pan():
    mapper = _mapper(bounds=DocumentBounds(0.0, 0.0, 1000.0, 1000.0), pan=(10.0, 0.0), size=(100.0, 50.0))

    lines = mapper.grid_lines(25.0)

    assert lines.vertical == pytest.approx((-15.0, 10.0, 35.0, 60.0, 85.0, 110.0))
    assert mapper.grid_lines(0.0).vertical == ()
