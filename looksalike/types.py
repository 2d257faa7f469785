"""Value types and type aliases for looks-alike."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import NamedTuple

# Just noticeable difference: a CIEDE2000 distance at or above this value
# is visible to a typical observer.
JND = 2.3


class Color(NamedTuple):
    r: int
    g: int
    b: int


class Point(NamedTuple):
    x: int
    y: int


class ColorPair(NamedTuple):
    """Two colors taken from the same coordinate of two images."""

    color1: Color
    color2: Color
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class DiffArea:
    """Bounding rectangle of the differing pixels."""

    left: int
    top: int
    width: int
    height: int


Comparator = Callable[[ColorPair], bool]
