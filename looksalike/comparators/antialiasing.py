"""Comparator that forgives differences caused by antialiased edges."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from looksalike.imaging.raster import Raster
    from looksalike.types import Color, ColorPair, Comparator


def brightness(color: Color) -> float:
    """Luma of a color on the YIQ Y axis."""
    return color[0] * 0.29889531 + color[1] * 0.58662247 + color[2] * 0.11448223


class AntialiasingComparator:
    """Wraps a comparator and reclassifies antialiasing pixels as matches.

    A mismatching pixel counts as antialiased when, in either image, it has
    both a darker and a brighter neighbour, no more than two neighbours of
    its own brightness, and the darkest or brightest neighbour is a solid
    pixel (more than two equal neighbours) in both images. A pixel on a
    longer run of equal pixels is a shifted edge and stays a difference.
    """

    def __init__(
        self,
        base: Comparator,
        raster1: Raster,
        raster2: Raster,
        brightness_tolerance: float = 0.0,
    ) -> None:
        self._base = base
        self._raster1 = raster1
        self._raster2 = raster2
        self._brightness_tolerance = brightness_tolerance
        self._width = min(raster1.width, raster2.width)
        self._height = min(raster1.height, raster2.height)

    def __call__(self, pair: ColorPair) -> bool:
        return self.compare(pair)

    def compare(self, pair: ColorPair) -> bool:
        return self._base(pair) or self._check_is_antialiased(pair.x, pair.y)

    def _check_is_antialiased(self, x: int, y: int) -> bool:
        return self._is_antialiased(self._raster2, x, y) or self._is_antialiased(self._raster1, x, y)

    def _is_antialiased(
        self,
        raster: Raster,
        cx: int,
        cy: int,
        check_extreme_pixels: bool = False,
    ) -> bool:
        # With check_extreme_pixels this only asks whether (cx, cy) is a solid pixel.
        tolerance = self._brightness_tolerance if check_extreme_pixels else 0.0
        center = brightness(raster.get_pixel(cx, cy))

        x0, y0 = max(cx - 1, 0), max(cy - 1, 0)
        x2, y2 = min(cx + 1, self._width - 1), min(cy + 1, self._height - 1)

        zeroes = positives = negatives = 0
        min_delta = max_delta = 0.0
        darkest = brightest = (cx, cy)

        for y in range(y0, y2 + 1):
            for x in range(x0, x2 + 1):
                if x == cx and y == cy:
                    continue

                delta = brightness(raster.get_pixel(x, y)) - center

                if abs(delta) <= tolerance:
                    zeroes += 1
                elif delta > tolerance:
                    positives += 1
                else:
                    negatives += 1

                if zeroes > 2:
                    return False

                if check_extreme_pixels:
                    continue

                if delta < min_delta:
                    min_delta = delta
                    darkest = (x, y)
                if delta > max_delta:
                    max_delta = delta
                    brightest = (x, y)

        if check_extreme_pixels:
            return True

        if negatives == 0 or positives == 0:
            return False

        return self._is_solid_in_both(*darkest) or self._is_solid_in_both(*brightest)

    def _is_solid_in_both(self, x: int, y: int) -> bool:
        return not self._is_antialiased(self._raster1, x, y, True) and not self._is_antialiased(
            self._raster2, x, y, True
        )
