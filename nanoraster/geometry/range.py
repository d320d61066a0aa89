"""Half-open integer ranges used to describe pixel spans."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Range:
    """A half-open range bounded from start (inclusive) to end (exclusive).

    Coordinates are signed so a range may be requested partially or fully
    outside an image; clip it against image bounds before indexing pixels.
    Ranges with ``end <= start`` are empty and mean "nothing to do".

    Example:
        >>> Range(1, 4).length()
        3
        >>> Range(0, 5).intersect(Range(3, 8))
        Range(start=3, end=5)
    """

    start: int
    end: int

    @staticmethod
    def new(span: range) -> "Range":
        """Create a range from a built-in ``range`` (step is ignored)."""
        return Range(span.start, span.stop)

    def length(self) -> int:
        """Number of positions covered, zero for empty ranges."""
        return max(0, self.end - self.start)

    def is_empty(self) -> bool:
        return self.end <= self.start

    def intersect(self, other: "Range") -> "Range":
        """Largest range contained in both; empty results keep ``end == start``."""
        start = max(self.start, other.start)
        end = min(self.end, other.end)
        return Range(start, max(start, end))

    def clip(self, low: int, high: int) -> "Range":
        return self.intersect(Range(low, high))

    def to_slice(self) -> slice:
        """Slice for indexing a line; only valid for non-negative ranges."""
        return slice(self.start, max(self.start, self.end))

    def to_range(self) -> range:
        return range(self.start, self.end)

    def __add__(self, offset: int) -> "Range":
        return Range(self.start + offset, self.end + offset)

    def __sub__(self, offset: int) -> "Range":
        return Range(self.start - offset, self.end - offset)
