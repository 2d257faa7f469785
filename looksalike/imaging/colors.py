"""Color parsing and CIE Lab helpers backed by Pillow and scikit-image."""

from __future__ import annotations

from functools import lru_cache

import numpy as np
from PIL import ImageColor
from skimage.color import deltaE_ciede2000, rgb2lab

from looksalike.exceptions import ConfigurationError
from looksalike.types import Color

Lab = tuple[float, float, float]


def parse_color(value: str | Color | tuple[int, int, int] | list[int]) -> Color:
    """Parse a CSS-like color string (``#ff00ff``, ``red``, ``rgb(...)``)."""
    if isinstance(value, (tuple, list)):
        return Color(*value[:3])
    if not isinstance(value, str):
        msg = f"Unable to parse color {value!r}"
        raise ConfigurationError(msg)
    try:
        rgb = ImageColor.getrgb(value)
    except ValueError as exc:
        msg = f"Unable to parse color {value!r}"
        raise ConfigurationError(msg) from exc
    return Color(*rgb[:3])


@lru_cache(maxsize=65536)
def rgb_to_lab(color: Color) -> Lab:
    """Convert an sRGB color to CIE Lab (D65 illuminant)."""
    rgb = np.array([[color]], dtype=np.float64) / 255.0
    lab = rgb2lab(rgb)[0, 0]
    return float(lab[0]), float(lab[1]), float(lab[2])


def ciede2000(lab1: Lab, lab2: Lab) -> float:
    """CIEDE2000 distance between two Lab colors."""
    distance = deltaE_ciede2000(np.array([lab1]), np.array([lab2]))
    return float(distance[0])
