"""Mapping between drawing (document) space and the interactive viewport."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple, Union

import numpy as np

from .types import DocumentBounds, Point, Viewport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridLines:
    """Viewport-space positions of the visible grid lines."""

    vertical: Tuple[float, ...]
    horizontal: Tuple[float, ...]


class CoordinateMapper:
    """Convert points between document space and viewport space.

    Document space is the fixed frame of the drawing, expressed in
    ``units_per_inch`` units per inch (inches by default). Viewport space is
    the on-screen frame obtained after applying zoom and pan. The reference
    frame is replaced atomically by :meth:`set_document_bounds` and
    :meth:`set_viewport`; points already returned are immutable and do not
    follow later changes.

    When the document bounds are degenerate (zero width or height) both
    directions return an identity-transformed copy of the input point.
    """

    def __init__(
        self,
        document_bounds: Optional[DocumentBounds] = None,
        viewport: Optional[Viewport] = None,
        *,
        units_per_inch: float = 1.0,
    ) -> None:
        self._bounds = document_bounds or DocumentBounds()
        self._viewport = viewport or Viewport()
        self.units_per_inch = float(units_per_inch)

    @property
    def document_bounds(self) -> DocumentBounds:
        return self._bounds

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    def set_document_bounds(self, bounds: DocumentBounds) -> None:
        logger.debug("Document bounds set to %s", bounds)
        self._bounds = bounds

    def set_viewport(
        self,
        zoom: float,
        pan: Union[Point, Tuple[float, float]],
        size: Optional[Tuple[float, float]] = None,
    ) -> None:
        """Replace zoom, pan and (optionally) viewport size in one step."""

        viewport = Viewport(
            zoom=zoom,
            pan=pan if isinstance(pan, Point) else Point(*pan),
            size=size if size is not None else self._viewport.size,
        )
        logger.debug("Viewport set to zoom=%.6g pan=%s size=%s", viewport.zoom, viewport.pan, viewport.size)
        self._viewport = viewport

    def scale_factor(self) -> float:
        return self._viewport.zoom

    def document_to_viewport(self, point: Point) -> Point:
        bounds = self._bounds
        if bounds.is_degenerate:
            return Point(point.x, point.y)
        # normalize to [0, 1] against the drawing, then back to display size
        scaled_x = (point.x - bounds.x) / bounds.width * bounds.width
        scaled_y = (point.y - bounds.y) / bounds.height * bounds.height
        view = self._viewport
        return Point(scaled_x * view.zoom + view.pan.x, scaled_y * view.zoom + view.pan.y)

    def viewport_to_document(self, point: Point) -> Point:
        bounds = self._bounds
        if bounds.is_degenerate:
            return Point(point.x, point.y)
        view = self._viewport
        scaled_x = (point.x - view.pan.x) / view.zoom
        scaled_y = (point.y - view.pan.y) / view.zoom
        return Point(
            scaled_x / bounds.width * bounds.width + bounds.x,
            scaled_y / bounds.height * bounds.height + bounds.y,
        )

    def inches_to_document_units(self, inches: float) -> float:
        return inches * self.units_per_inch

    def document_units_to_inches(self, units: float) -> float:
        return units / self.units_per_inch

    def snap_to_document_grid(self, point: Point, grid_size_inches: float) -> Point:
        """Round each axis of ``point`` to the nearest grid multiple."""

        step = self.inches_to_document_units(grid_size_inches)
        if not step > 0.0:
            return Point(point.x, point.y)
        return Point(round(point.x / step) * step, round(point.y / step) * step)

    def grid_lines(self, grid_size_inches: float) -> GridLines:
        """Return the grid lines that cross the viewport, in viewport coordinates.

        One grid step of margin is kept on every side so that lines entering
        the view during a pan are already present.
        """

        step = self.inches_to_document_units(grid_size_inches)
        if not step > 0.0:
            return GridLines(vertical=(), horizontal=())

        width, height = self._viewport.size
        top_left = self.viewport_to_document(Point(0.0, 0.0))
        bottom_right = self.viewport_to_document(Point(width, height))

        def _axis(lo: float, hi: float, to_view, limit: float) -> Tuple[float, ...]:
            first = math.floor(lo / step)
            last = math.ceil(hi / step)
            doc_values = np.arange(first, last + 1, dtype=float) * step
            view_values = np.array([to_view(value) for value in doc_values], dtype=float)
            keep = (view_values >= -step) & (view_values <= limit + step)
            return tuple(float(v) for v in view_values[keep])

        vertical = _axis(
            top_left.x, bottom_right.x, lambda v: self.document_to_viewport(Point(v, 0.0)).x, width
        )
        horizontal = _axis(
            top_left.y, bottom_right.y, lambda v: self.document_to_viewport(Point(0.0, v)).y, height
        )
        return GridLines(vertical=vertical, horizontal=horizontal)

    def line_thickness(self, base_thickness: float = 1.0) -> float:
        """Stroke width that renders at ``base_thickness`` regardless of zoom."""

        return base_thickness / self._viewport.zoom

    def font_size(self, base_font_size: float = 12.0) -> float:
        return max(8.0, base_font_size / self._viewport.zoom)


__all__ = ["CoordinateMapper", "GridLines"]
