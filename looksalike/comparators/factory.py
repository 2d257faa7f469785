"""Builds the comparator chain for a comparison call."""

from __future__ import annotations

from typing import TYPE_CHECKING

from looksalike.comparators.antialiasing import AntialiasingComparator
from looksalike.comparators.base import are_colors_same, make_ciede2000_comparator
from looksalike.comparators.caret import IgnoreCaretComparator

if TYPE_CHECKING:
    from looksalike.imaging.raster import Raster
    from looksalike.models.options import CompareOptions
    from looksalike.types import Comparator


def create_base_comparator(options: CompareOptions) -> Comparator:
    if options.strict:
        return are_colors_same
    return make_ciede2000_comparator(options.effective_tolerance)


def create_comparator(raster1: Raster, raster2: Raster, options: CompareOptions) -> Comparator:
    """Base comparator, then the antialiasing and caret wrappers when enabled."""
    comparator = create_base_comparator(options)

    if options.ignore_antialiasing:
        comparator = AntialiasingComparator(
            comparator,
            raster1,
            raster2,
            brightness_tolerance=options.antialiasing_tolerance,
        )

    if options.ignore_caret:
        comparator = IgnoreCaretComparator(comparator, raster1, raster2, options.pixel_ratio)

    return comparator
