"""Basic geometric primitives to describe sizes, positions and regions."""

from .mapping import ImageMapping
from .point import Point, RasterSize
from .range import Range
from .range2d import Range2d

__all__ = [
    "ImageMapping",
    "Point",
    "RasterSize",
    "Range",
    "Range2d",
]
