"""Read and write access contracts for rasters consumed by the filters."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np

from nanoraster.geometry.point import RasterSize
from nanoraster.geometry.range2d import Range2d


@runtime_checkable
class ReadableRaster(Protocol):
    """
    Read-only access to image pixels, usually used as input data.

    Every line must be stored as a contiguous block, but lines may be laid
    out in any way (padded rows, separate allocations, ...).
    """

    def size(self) -> RasterSize:
        """Image width and height, in pixels."""
        ...

    def line(self, index: int) -> np.ndarray:
        """Pixels of one line, at least ``width`` long; raises IndexError out of range."""
        ...


@runtime_checkable
class WritableRaster(ReadableRaster, Protocol):
    """Read-write access to image pixels, used as image data output."""

    def line_mut(self, index: int) -> np.ndarray:
        """Writable view of one line; raises IndexError out of range."""
        ...


def raster_bounds(raster: ReadableRaster) -> Range2d:
    """Region covering the whole raster."""
    return Range2d.from_size(raster.size())
