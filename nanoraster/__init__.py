"""Generic 2D raster buffers and boundary-replicating convolution filters."""

from .config import FilterConfig, NanoRasterConfig, RasterConfig
from .geometry import ImageMapping, Point, RasterSize, Range, Range2d
from .image import RasterBuffer, RasterLayout, ReadableRaster, WritableRaster

# Specific algorithms are exposed from their own subpackage
from . import filter

__version__ = "0.1.0"

__all__ = [
    "FilterConfig",
    "ImageMapping",
    "NanoRasterConfig",
    "Point",
    "RasterBuffer",
    "RasterConfig",
    "RasterLayout",
    "RasterSize",
    "Range",
    "Range2d",
    "ReadableRaster",
    "WritableRaster",
    "filter",
]
