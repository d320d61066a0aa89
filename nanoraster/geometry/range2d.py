"""Rectangular pixel regions built from two half-open ranges."""

from __future__ import annotations

from dataclasses import dataclass

from nanoraster.geometry.point import Point
from nanoraster.geometry.range import Range


@dataclass(frozen=True)
class Range2d:
    """A two directional (half-open) range describing an area within an image.

    Example:
        >>> region = Range2d.new(range(0, 2), range(1, 4))
        >>> (region.width(), region.height())
        (2, 3)
    """

    x: Range
    y: Range

    @staticmethod
    def new(x: range, y: range) -> "Range2d":
        return Range2d(Range.new(x), Range.new(y))

    @staticmethod
    def from_size(size: Point) -> "Range2d":
        """Region covering a whole image of the given size."""
        return Range2d(Range(0, size.x), Range(0, size.y))

    def width(self) -> int:
        return self.x.length()

    def height(self) -> int:
        return self.y.length()

    def size(self) -> Point:
        return Point(self.width(), self.height())

    def start(self) -> Point:
        """Top-left corner of the region."""
        return Point(self.x.start, self.y.start)

    def is_empty(self) -> bool:
        return self.x.is_empty() or self.y.is_empty()

    def intersect(self, other: "Range2d") -> "Range2d":
        return Range2d(self.x.intersect(other.x), self.y.intersect(other.y))

    def __add__(self, shift: Point) -> "Range2d":
        return Range2d(self.x + shift.x, self.y + shift.y)

    def __sub__(self, shift: Point) -> "Range2d":
        return Range2d(self.x - shift.x, self.y - shift.y)
