"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

from looksalike.imaging.raster import Raster

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GRAY = (128, 128, 128)

Pixels = dict[tuple[int, int], tuple[int, int, int]]


def build_image(
    width: int,
    height: int,
    color: tuple[int, int, int] = WHITE,
    pixels: Pixels | None = None,
) -> Image.Image:
    image = Image.new("RGB", (width, height), color=color)
    for (x, y), value in (pixels or {}).items():
        image.putpixel((x, y), value)
    return image


def _edge_images() -> tuple[Image.Image, Image.Image]:
    # Black/white vertical edge; the first image has a gray blended column at x=2.
    first: Pixels = {}
    second: Pixels = {}
    for y in range(5):
        for x in range(5):
            second[(x, y)] = BLACK if x < 2 else WHITE
            first[(x, y)] = GRAY if x == 2 else second[(x, y)]
    return build_image(5, 5, pixels=first), build_image(5, 5, pixels=second)


@pytest.fixture()
def make_raster() -> Callable[..., Raster]:
    """Factory for small in-memory rasters."""

    def _make(
        width: int,
        height: int,
        color: tuple[int, int, int] = WHITE,
        pixels: Pixels | None = None,
    ) -> Raster:
        return Raster.from_image(build_image(width, height, color, pixels))

    return _make


@pytest.fixture()
def write_image(tmp_path: Path) -> Callable[..., Path]:
    """Factory saving a small PNG into tmp_path and returning its path."""

    def _write(
        name: str,
        width: int,
        height: int,
        color: tuple[int, int, int] = WHITE,
        pixels: Pixels | None = None,
    ) -> Path:
        path = tmp_path / name
        build_image(width, height, color, pixels).save(path)
        return path

    return _write


@pytest.fixture()
def edge_rasters() -> tuple[Raster, Raster]:
    """Antialiased edge (gray column) vs the same edge without blending."""
    first, second = _edge_images()
    return Raster.from_image(first), Raster.from_image(second)


@pytest.fixture()
def edge_files(tmp_path: Path) -> tuple[Path, Path]:
    first, second = _edge_images()
    reference = tmp_path / "edge_reference.png"
    current = tmp_path / "edge_current.png"
    first.save(reference)
    second.save(current)
    return reference, current
