"""In-memory raster backed by a Pillow RGBA image."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PIL import Image

from looksalike.types import Color

if TYPE_CHECKING:
    from pathlib import Path


class Raster:
    """A 2D grid of colors with explicit width and height.

    Alpha is stored so diff images can dim copied pixels, but
    ``get_pixel`` only ever returns the RGB channels.
    """

    def __init__(self, image: Image.Image) -> None:
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        self._image = image
        self._pixels = image.load()

    @classmethod
    def empty(cls, width: int, height: int) -> Raster:
        """Create a fully transparent black raster."""
        return cls(Image.new("RGBA", (width, height), color=(0, 0, 0, 0)))

    @classmethod
    def from_image(cls, image: Image.Image) -> Raster:
        return cls(image)

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def image(self) -> Image.Image:
        return self._image

    def get_pixel(self, x: int, y: int) -> Color:
        r, g, b, _ = self._pixels[x, y]
        return Color(r, g, b)

    def set_pixel(self, x: int, y: int, color: Color, alpha: int = 255) -> None:
        self._pixels[x, y] = (color[0], color[1], color[2], alpha)

    def save(self, path: str | Path) -> None:
        """Encode the raster as PNG."""
        self._image.save(path, format="PNG")

    def __repr__(self) -> str:
        return f"Raster(width={self.width}, height={self.height})"
