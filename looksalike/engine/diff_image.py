"""Highlighted diff image synthesis with single-pixel noise suppression."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from looksalike.engine.scan import iterate_rect
from looksalike.imaging.raster import Raster
from looksalike.types import ColorPair

if TYPE_CHECKING:
    from looksalike.types import Color, Comparator

logger = structlog.get_logger(__name__)

# Alpha for pixels copied from the reference image, so highlights stand out.
DIMMED_ALPHA = 100

IgnorePredicate = Callable[[int, int], bool]


@dataclass
class DiffImageResult:
    """Result of a diff image build."""

    image: Raster
    differences: int
    pixel_ignored: bool = False

    @property
    def equal(self) -> bool:
        return self.differences == 0


class RowWindow:
    """Flags of the last three scanned rows, keyed by x.

    Three sets are rotated in place: ``current`` is the row being scanned,
    ``previous`` the row awaiting a verdict and ``before_previous`` its
    upper neighbour.
    """

    def __init__(self) -> None:
        self._rows: list[set[int]] = [set(), set(), set()]
        self._current = 0

    @property
    def current(self) -> set[int]:
        return self._rows[self._current]

    @property
    def previous(self) -> set[int]:
        return self._rows[(self._current - 1) % 3]

    @property
    def before_previous(self) -> set[int]:
        return self._rows[(self._current - 2) % 3]

    def rotate(self) -> None:
        """Make the current row the previous one and start an empty row."""
        self._current = (self._current + 1) % 3
        self._rows[self._current].clear()

    def isolated_in_previous(self) -> list[int]:
        """Flagged x positions of the previous row with no flagged neighbour."""
        above, row, below = self.before_previous, self.previous, self.current
        return [
            x
            for x in sorted(row)
            if not (
                x - 1 in above
                or x in above
                or x + 1 in above
                or x - 1 in row
                or x + 1 in row
                or x - 1 in below
                or x in below
                or x + 1 in below
            )
        ]


class DiffImageBuilder:
    """Paints differing pixels of two rasters onto a canvas of their max size.

    Cells outside the smaller raster are always highlighted and counted.
    Inside both rasters, a highlighted pixel whose eight neighbours are all
    unflagged is repainted with its original color once both of its
    neighbour rows are known.
    """

    def __init__(
        self,
        raster1: Raster,
        raster2: Raster,
        comparator: Comparator,
        highlight_color: Color,
        ignore_different_pixels: IgnorePredicate | None = None,
    ) -> None:
        self._raster1 = raster1
        self._raster2 = raster2
        self._comparator = comparator
        self._highlight_color = highlight_color
        self._ignore = ignore_different_pixels

        self._width = max(raster1.width, raster2.width)
        self._height = max(raster1.height, raster2.height)
        self._min_width = min(raster1.width, raster2.width)
        self._min_height = min(raster1.height, raster2.height)

    async def build(self) -> DiffImageResult:
        """Scan the full canvas and return the diff image."""
        result = DiffImageResult(image=Raster.empty(self._width, self._height), differences=0)
        window = RowWindow()

        def on_pixel(x: int, y: int) -> None:
            self._paint_pixel(result, window, x, y)

        def on_row_done(y: int, is_last_row: bool) -> None:
            if y > 0:
                self._suppress_noise(result, window, y - 1)
            window.rotate()
            if is_last_row:
                self._suppress_noise(result, window, y)

        await iterate_rect(self._width, self._height, on_pixel, on_row_done)

        logger.debug(
            "diff_image_built",
            width=self._width,
            height=self._height,
            differences=result.differences,
            pixel_ignored=result.pixel_ignored,
        )
        return result

    def _paint_pixel(self, result: DiffImageResult, window: RowWindow, x: int, y: int) -> None:
        image = result.image

        if x >= self._min_width or y >= self._min_height:
            image.set_pixel(x, y, self._highlight_color)
            result.differences += 1
            return

        color1 = self._raster1.get_pixel(x, y)
        color2 = self._raster2.get_pixel(x, y)

        if self._comparator(ColorPair(color1, color2, x, y)):
            image.set_pixel(x, y, color1, DIMMED_ALPHA)
        elif self._ignore is not None and self._ignore(x, y):
            result.pixel_ignored = True
            image.set_pixel(x, y, color1, DIMMED_ALPHA)
        else:
            window.current.add(x)
            image.set_pixel(x, y, self._highlight_color)
            result.differences += 1

    def _suppress_noise(self, result: DiffImageResult, window: RowWindow, y: int) -> None:
        for x in window.isolated_in_previous():
            result.image.set_pixel(x, y, self._raster1.get_pixel(x, y), DIMMED_ALPHA)
            result.differences -= 1
