"""Public comparison operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import structlog

from looksalike.comparators.base import make_ciede2000_comparator
from looksalike.comparators.factory import create_base_comparator, create_comparator
from looksalike.config.settings import get_settings
from looksalike.engine.diff_area import get_diff_area as compute_diff_area
from looksalike.engine.diff_image import DiffImageBuilder
from looksalike.engine.scan import get_diff_pixels_coords
from looksalike.imaging.loader import read_pair, save_raster
from looksalike.models.options import CompareOptions, DiffOptions
from looksalike.types import JND, Color, ColorPair, DiffArea

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from looksalike.engine.diff_image import IgnorePredicate
    from looksalike.imaging.loader import ImageSource, RasterPair
    from looksalike.types import Comparator

logger = structlog.get_logger(__name__)


@dataclass
class CreateDiffResult:
    """Outcome of ``create_diff``."""

    equal: bool
    pixel_ignored: bool = False
    diff_path: Path | None = None


async def looks_same(reference: ImageSource, current: ImageSource, **options: Any) -> bool:
    """Return True when the two images look the same.

    Images of different sizes are never the same. Otherwise the scan stops
    at the first difference the comparator chain cannot explain away.
    """
    opts = CompareOptions.from_kwargs(**options)
    pair = await read_pair(reference, current)

    if not pair.same_size:
        _log_size_mismatch(pair)
        return False

    comparator = create_comparator(pair.first, pair.second, opts)
    diff_points = await get_diff_pixels_coords(
        pair.first, pair.second, comparator, stop_on_first_fail=True
    )
    return not diff_points


async def get_diff_area(
    reference: ImageSource, current: ImageSource, **options: Any
) -> DiffArea | None:
    """Return the rectangle enclosing all differences, or None.

    For images of different sizes the whole larger canvas is reported.
    """
    opts = CompareOptions.from_kwargs(**options)
    pair = await read_pair(reference, current)

    if not pair.same_size:
        _log_size_mismatch(pair)
        return DiffArea(
            left=0,
            top=0,
            width=max(pair.first.width, pair.second.width),
            height=max(pair.first.height, pair.second.height),
        )

    comparator = create_comparator(pair.first, pair.second, opts)
    diff_points = await get_diff_pixels_coords(pair.first, pair.second, comparator)
    if not diff_points:
        return None

    area = compute_diff_area(diff_points)
    logger.debug("diff_area_found", area=area, differing_pixels=len(diff_points))
    return area


async def create_diff(
    reference: ImageSource,
    current: ImageSource,
    diff: str | Path,
    *,
    highlight_color: str | Color | None = None,
    ignore_different_pixels: tuple[ImageSource, ImageSource] | None = None,
    **options: Any,
) -> CreateDiffResult:
    """Build a highlighted diff image and write it to ``diff`` if they differ.

    ``ignore_different_pixels`` is an optional ``(reference, current)`` pair;
    wherever those two images differ, differences between ``reference`` and
    ``current`` are painted dimmed and not counted.
    """
    if highlight_color is None:
        highlight_color = get_settings().highlight_color
    opts = DiffOptions.from_kwargs(highlight_color=highlight_color, **options)

    pair = await read_pair(reference, current)

    ignore: IgnorePredicate | None = None
    if ignore_different_pixels is not None:
        mask_pair = await read_pair(*ignore_different_pixels)
        ignore = _make_ignore_predicate(mask_pair, create_base_comparator(opts))

    builder = DiffImageBuilder(
        pair.first,
        pair.second,
        create_comparator(pair.first, pair.second, opts),
        opts.highlight_color,
        ignore,
    )
    result = await builder.build()

    if result.equal:
        return CreateDiffResult(equal=True, pixel_ignored=result.pixel_ignored)

    path = await save_raster(result.image, diff)
    logger.info(
        "diff_saved",
        path=str(path),
        differences=result.differences,
        pixel_ignored=result.pixel_ignored,
    )
    return CreateDiffResult(equal=False, pixel_ignored=result.pixel_ignored, diff_path=path)


def colors(
    color1: Sequence[int], color2: Sequence[int], tolerance: float | None = None
) -> bool:
    """Compare two colors with CIEDE2000; ``tolerance`` defaults to the JND."""
    comparator = make_ciede2000_comparator(JND if tolerance is None else tolerance)
    return comparator(ColorPair(Color(*color1[:3]), Color(*color2[:3])))


def _make_ignore_predicate(mask_pair: RasterPair, comparator: Comparator) -> IgnorePredicate:
    """Pixels where the mask images differ, or fall outside the smaller one."""
    first, second = mask_pair.first, mask_pair.second
    max_width = max(first.width, second.width)
    max_height = max(first.height, second.height)
    min_width = min(first.width, second.width)
    min_height = min(first.height, second.height)

    def should_ignore(x: int, y: int) -> bool:
        if x >= min_width:
            return x < max_width
        if y >= min_height:
            return y < max_height
        pair = ColorPair(first.get_pixel(x, y), second.get_pixel(x, y), x, y)
        return not comparator(pair)

    return should_ignore


def _log_size_mismatch(pair: RasterPair) -> None:
    logger.info(
        "size_mismatch",
        first=(pair.first.width, pair.first.height),
        second=(pair.second.width, pair.second.height),
    )
