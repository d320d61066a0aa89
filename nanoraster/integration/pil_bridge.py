"""Conversion between in-memory Pillow images and raster buffers."""

from __future__ import annotations

import numpy as np
from PIL import Image

from nanoraster.image.buffer import RasterBuffer
from nanoraster.image.contracts import ReadableRaster

_SINGLE_BAND_MODES = {"1", "L", "I", "F", "I;16"}


def raster_from_pil(image: Image.Image) -> RasterBuffer:
    """
    Convert a single-band Pillow image into a raster buffer.

    Args:
        image: Pillow image in mode ``L``, ``I``, ``I;16``, ``F`` or ``1``

    Returns:
        Raster with the image's size and numpy pixel type

    Raises:
        ValueError: For multi-band images (convert them to one band first)
    """
    if image.mode not in _SINGLE_BAND_MODES:
        raise ValueError(
            f"Unsupported image mode {image.mode!r}, expected one of "
            f"{sorted(_SINGLE_BAND_MODES)}"
        )
    return RasterBuffer.from_array(np.array(image))


def raster_to_pil(raster: ReadableRaster) -> Image.Image:
    """Convert a raster into a Pillow image, the mode follows the pixel type."""
    if isinstance(raster, RasterBuffer):
        array = raster.to_array()
    else:
        size = raster.size()
        array = np.array([raster.line(line)[: size.x] for line in range(size.y)])

    if array.dtype == np.float64:
        array = array.astype(np.float32)
    elif array.dtype == np.int64:
        array = array.astype(np.int32)
    return Image.fromarray(array)
