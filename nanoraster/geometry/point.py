"""General purpose two dimensional integer vector."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Point:
    """2D vector used for image sizes, positions and shifts.

    Arithmetic with another ``Point`` is componentwise; arithmetic with a
    scalar applies the scalar to both components.
    """

    x: int
    y: int

    def product(self) -> int:
        """Area covered by a size, ``x * y``."""
        return self.x * self.y

    def __add__(self, other: Union["Point", int]) -> "Point":
        if isinstance(other, Point):
            return Point(self.x + other.x, self.y + other.y)
        return Point(self.x + other, self.y + other)

    def __sub__(self, other: Union["Point", int]) -> "Point":
        if isinstance(other, Point):
            return Point(self.x - other.x, self.y - other.y)
        return Point(self.x - other, self.y - other)

    def __mul__(self, scalar: int) -> "Point":
        return Point(self.x * scalar, self.y * scalar)

    def __floordiv__(self, scalar: int) -> "Point":
        return Point(self.x // scalar, self.y // scalar)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


RasterSize = Point
