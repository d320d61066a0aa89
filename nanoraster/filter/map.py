"""Per-pixel mapping from one image into another."""

from __future__ import annotations

from typing import Any, Callable

from nanoraster.geometry.mapping import ImageMapping
from nanoraster.geometry.range2d import Range2d
from nanoraster.image.buffer import RasterBuffer
from nanoraster.image.contracts import ReadableRaster, WritableRaster, raster_bounds


def map_range(
    input: ReadableRaster,
    output: WritableRaster,
    input_range: Range2d,
    output_range: Range2d,
    operator: Callable[[Any, Any], Any],
) -> None:
    """
    Write ``operator(src_pixel, dst_pixel)`` for every mapped pixel pair.

    Args:
        input: Input read-only image
        output: Output mutable image
        input_range: Input pixel region
        output_range: Output pixel region, its top-left corner receives the
            top-left corner of ``input_range``
        operator: Function of the source and current destination pixel
    """
    mapping = ImageMapping.create(
        input_range, output_range, raster_bounds(input), raster_bounds(output)
    )
    if mapping.is_empty():
        return

    src_columns = mapping.src.x.to_slice()
    dst_columns = mapping.dst.x.to_slice()

    for line in range(mapping.src.height()):
        src = input.line(mapping.src.y.start + line)[src_columns]
        dst = output.line_mut(mapping.dst.y.start + line)[dst_columns]

        for column in range(min(len(src), len(dst))):
            dst[column] = operator(src[column], dst[column])


def map_new(
    input: ReadableRaster, operator: Callable[[Any], Any], dtype: Any = None
) -> RasterBuffer:
    """
    Create a new image of ``operator(pixel)`` values.

    Args:
        input: Input image
        operator: Function applied to every pixel
        dtype: Pixel type of the new image, defaults to the input's

    Returns:
        New image of the same size
    """
    if dtype is None:
        output = RasterBuffer.new_like(input)
    else:
        output = RasterBuffer.new(input.size(), fill=0, dtype=dtype)
    bounds = raster_bounds(input)
    map_range(input, output, bounds, bounds, lambda src, _: operator(src))
    return output
