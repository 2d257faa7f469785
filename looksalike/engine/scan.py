"""Row-by-row canvas scanning that yields to the event loop."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from looksalike.types import ColorPair, Point

if TYPE_CHECKING:
    from collections.abc import Callable

    from looksalike.imaging.raster import Raster
    from looksalike.types import Comparator


async def iterate_rect(
    width: int,
    height: int,
    on_pixel: Callable[[int, int], bool | None],
    on_row_done: Callable[[int, bool], None] | None = None,
) -> bool:
    """Visit every cell of a ``width`` x ``height`` rectangle row by row.

    ``on_pixel`` returning ``False`` stops the scan. ``on_row_done`` gets the
    row index and whether it was the last row. Rows never overlap; the event
    loop runs between them. Returns ``True`` when the whole rectangle was
    visited.
    """
    for y in range(height):
        for x in range(width):
            if on_pixel(x, y) is False:
                return False
        if on_row_done is not None:
            on_row_done(y, y == height - 1)
        await asyncio.sleep(0)
    return True


async def get_diff_pixels_coords(
    raster1: Raster,
    raster2: Raster,
    comparator: Comparator,
    stop_on_first_fail: bool = False,
) -> list[Point]:
    """Return the points of the common canvas the comparator rejects."""
    width = min(raster1.width, raster2.width)
    height = min(raster1.height, raster2.height)
    diff_points: list[Point] = []

    def check(x: int, y: int) -> bool:
        pair = ColorPair(raster1.get_pixel(x, y), raster2.get_pixel(x, y), x, y)
        if comparator(pair):
            return True
        diff_points.append(Point(x, y))
        return not stop_on_first_fail

    await iterate_rect(width, height, check)
    return diff_points
