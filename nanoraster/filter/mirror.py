"""Mirroring along the vertical and horizontal image axes."""

from __future__ import annotations

from nanoraster.image.buffer import RasterBuffer
from nanoraster.image.contracts import ReadableRaster


def mirror_horizontal_new(input: ReadableRaster) -> RasterBuffer:
    """New image with every line reversed (flip left-right)."""
    output = RasterBuffer.new_like(input)
    for line in range(input.size().y):
        src = input.line(line)[: input.size().x]
        output.line_mut(line)[:] = src[::-1]
    return output


def mirror_vertical_new(input: ReadableRaster) -> RasterBuffer:
    """New image with the line order reversed (flip top-bottom)."""
    output = RasterBuffer.new_like(input)
    height = input.size().y
    for line in range(height):
        output.line_mut(height - 1 - line)[:] = input.line(line)[: input.size().x]
    return output
