"""Perceptual image comparison for visual regression tests."""

from looksalike.api import CreateDiffResult, colors, create_diff, get_diff_area, looks_same
from looksalike.exceptions import (
    ConfigurationError,
    InputError,
    LooksAlikeError,
    OutputError,
)
from looksalike.types import JND, Color, DiffArea

__all__ = [
    "JND",
    "Color",
    "ConfigurationError",
    "CreateDiffResult",
    "DiffArea",
    "InputError",
    "LooksAlikeError",
    "OutputError",
    "colors",
    "create_diff",
    "get_diff_area",
    "looks_same",
]
