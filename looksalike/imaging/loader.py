"""Image loading and saving for comparison calls.

Decoding and encoding run in worker threads so a comparison never blocks
the event loop on file I/O.
"""

from __future__ import annotations

import asyncio
import io
from dataclasses import dataclass
from pathlib import Path

import structlog
from PIL import Image

from looksalike.exceptions import InputError, OutputError
from looksalike.imaging.raster import Raster

logger = structlog.get_logger(__name__)

ImageSource = str | Path | bytes | Image.Image | Raster


@dataclass
class RasterPair:
    """Two decoded images: the reference and the one compared with it."""

    first: Raster
    second: Raster

    @property
    def same_size(self) -> bool:
        return (self.first.width, self.first.height) == (
            self.second.width,
            self.second.height,
        )


def _describe(source: ImageSource) -> str:
    if isinstance(source, bytes):
        return f"<{len(source)} bytes>"
    if isinstance(source, (Image.Image, Raster)):
        return repr(source)
    return str(source)


def load_raster(source: ImageSource) -> Raster:
    """Decode a single image source into a Raster."""
    if isinstance(source, Raster):
        return source
    if isinstance(source, Image.Image):
        return Raster.from_image(source)

    try:
        if isinstance(source, bytes):
            image = Image.open(io.BytesIO(source))
        else:
            image = Image.open(Path(source))
        image.load()
    except (OSError, ValueError) as exc:
        msg = f"Unable to read image {_describe(source)}: {exc}"
        raise InputError(msg) from exc

    return Raster.from_image(image)


async def read_pair(first: ImageSource, second: ImageSource) -> RasterPair:
    """Decode both sources concurrently."""
    raster1, raster2 = await asyncio.gather(
        asyncio.to_thread(load_raster, first),
        asyncio.to_thread(load_raster, second),
    )
    logger.debug(
        "pair_loaded",
        first=(raster1.width, raster1.height),
        second=(raster2.width, raster2.height),
    )
    return RasterPair(first=raster1, second=raster2)


async def save_raster(raster: Raster, path: str | Path) -> Path:
    """Write a raster to ``path`` as PNG."""
    target = Path(path)
    try:
        await asyncio.to_thread(raster.save, target)
    except (OSError, ValueError) as exc:
        msg = f"Unable to write diff image {target}: {exc}"
        raise OutputError(msg) from exc
    logger.debug("raster_saved", path=str(target))
    return target
