"""Nearest-neighbour image resize."""

from __future__ import annotations

from typing import List

from nanoraster.geometry.point import RasterSize
from nanoraster.image.buffer import RasterBuffer, pixel_dtype
from nanoraster.image.contracts import ReadableRaster


def resize_nearest_new(image: ReadableRaster, size: RasterSize) -> RasterBuffer:
    """
    Resize an image to ``size`` picking the nearest source pixel.

    Args:
        image: Input image
        size: Target width and height

    Returns:
        New image of the target size and the input's pixel type
    """
    source = image.size()
    if size.product() == 0:
        return RasterBuffer.new(size, fill=0, dtype=pixel_dtype(image))
    if source.x == 0 or source.y == 0:
        raise ValueError(f"Cannot resize an empty image {source} to {size}")

    x_indices = scale_index_table(source.x, size.x)
    y_indices = scale_index_table(source.y, size.y)

    result = RasterBuffer.new(size, fill=0, dtype=pixel_dtype(image))
    for line in range(size.y):
        src = image.line(y_indices[line])
        result.line_mut(line)[:] = src[x_indices]

    return result


def scale_index_table(source_size: int, target_size: int) -> List[int]:
    """Source index for every target index, ``x * source_size // target_size``."""
    return [x * source_size // target_size for x in range(target_size)]
