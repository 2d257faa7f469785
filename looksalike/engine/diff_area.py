"""Bounding box of a set of differing pixels."""

from __future__ import annotations

from typing import TYPE_CHECKING

from looksalike.types import DiffArea

if TYPE_CHECKING:
    from collections.abc import Iterable

    from looksalike.types import Point


def get_diff_area(points: Iterable[Point]) -> DiffArea:
    """Smallest rectangle covering every point.

    Raises ``ValueError`` for an empty input; "no differences" means
    "no diff area" and must be handled by the caller.
    """
    points = list(points)
    if not points:
        msg = "Cannot compute a diff area without differing pixels"
        raise ValueError(msg)

    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    left, right = min(xs), max(xs)
    top, bottom = min(ys), max(ys)

    return DiffArea(left=left, top=top, width=right - left + 1, height=bottom - top + 1)
