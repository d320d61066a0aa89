"""Contracts and structures for in-memory image buffers."""

from .buffer import RasterBuffer
from .contracts import ReadableRaster, WritableRaster, raster_bounds
from .layout import RasterLayout

__all__ = [
    "RasterBuffer",
    "RasterLayout",
    "ReadableRaster",
    "WritableRaster",
    "raster_bounds",
]
