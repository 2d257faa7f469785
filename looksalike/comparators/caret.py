"""Comparator that ignores a blinking text caret."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import structlog

from looksalike.comparators.base import colors_equal
from looksalike.types import Point

if TYPE_CHECKING:
    from looksalike.imaging.raster import Raster
    from looksalike.types import ColorPair, Comparator

logger = structlog.get_logger(__name__)


class IgnoreCaretComparator:
    """Wraps a comparator and forgives the first caret-shaped difference.

    Pixels are expected in scan order. The first mismatch starts a probe for
    a vertical strip exactly ``pixel_ratio`` pixels wide and at least two
    rows tall in which every pixel differs while the columns beside it
    match. Once such a strip is found, mismatches inside it are matches and
    every other mismatch is reported as is.
    """

    def __init__(
        self,
        base: Comparator,
        raster1: Raster,
        raster2: Raster,
        pixel_ratio: float = 1.0,
    ) -> None:
        self._base = base
        self._rasters = (raster1, raster2)
        self._pixel_ratio = max(math.floor(pixel_ratio), 1)
        self._caret: tuple[Point, Point] | None = None

    @property
    def caret_area(self) -> tuple[Point, Point] | None:
        """Top-left and bottom-right corners of the detected caret."""
        return self._caret

    def __call__(self, pair: ColorPair) -> bool:
        return self.compare(pair)

    def compare(self, pair: ColorPair) -> bool:
        return self._base(pair) or self._check_is_caret(Point(pair.x, pair.y))

    def _check_is_caret(self, point: Point) -> bool:
        if self._caret is not None:
            top_left, bottom_right = self._caret
            return (
                top_left.x <= point.x <= bottom_right.x
                and top_left.y <= point.y <= bottom_right.y
            )

        last_point = self._last_caret_point(point)
        if not self._looks_like_caret(point, last_point):
            return False

        self._caret = (point, last_point)
        logger.debug("caret_detected", top_left=tuple(point), bottom_right=tuple(last_point))
        return True

    def _last_caret_point(self, first: Point) -> Point:
        current = first
        while True:
            following = self._next_caret_point(first, current)
            if self._is_outside_rasters(following) or self._are_same_pixels(following):
                return current
            current = following

    def _next_caret_point(self, first: Point, current: Point) -> Point:
        next_x = current.x + 1
        if next_x < first.x + self._pixel_ratio:
            return Point(next_x, current.y)
        return Point(first.x, current.y + 1)

    def _is_outside_rasters(self, point: Point) -> bool:
        return point.x < 0 or any(
            point.x >= r.width or point.y >= r.height for r in self._rasters
        )

    def _are_same_pixels(self, point: Point) -> bool:
        raster1, raster2 = self._rasters
        return colors_equal(raster1.get_pixel(*point), raster2.get_pixel(*point))

    def _looks_like_caret(self, first: Point, last: Point) -> bool:
        height = last.y + 1 - first.y
        width = last.x + 1 - first.x
        if height <= 1 or width != self._pixel_ratio:
            return False
        # A caret stands alone: the columns on both sides of it must match.
        return not (
            self._column_differs(first.x - 1, first.y, last.y)
            or self._column_differs(last.x + 1, first.y, last.y)
        )

    def _column_differs(self, x: int, top: int, bottom: int) -> bool:
        for y in range(top, bottom + 1):
            point = Point(x, y)
            if not self._is_outside_rasters(point) and not self._are_same_pixels(point):
                return True
        return False
