"""Base color comparators: exact equality and CIEDE2000 distance."""

from __future__ import annotations

from typing import TYPE_CHECKING

from looksalike.exceptions import ConfigurationError
from looksalike.imaging.colors import ciede2000, rgb_to_lab

if TYPE_CHECKING:
    from looksalike.types import Color, ColorPair, Comparator


def colors_equal(color1: Color, color2: Color) -> bool:
    return color1[0] == color2[0] and color1[1] == color2[1] and color1[2] == color2[2]


def are_colors_same(pair: ColorPair) -> bool:
    """Strict comparator: channels must match exactly."""
    return colors_equal(pair.color1, pair.color2)


def make_ciede2000_comparator(tolerance: float) -> Comparator:
    """Comparator treating colors closer than ``tolerance`` as the same.

    Exact matches skip the Lab conversion entirely.
    """
    if tolerance < 0:
        msg = f"Tolerance must be non-negative, got {tolerance}"
        raise ConfigurationError(msg)

    def do_colors_look_same(pair: ColorPair) -> bool:
        if are_colors_same(pair):
            return True
        lab1 = rgb_to_lab(pair.color1)
        lab2 = rgb_to_lab(pair.color2)
        return ciede2000(lab1, lab2) < tolerance

    return do_colors_look_same
