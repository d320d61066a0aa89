"""Mapping of a source region onto a destination region of equal size."""

from __future__ import annotations

from dataclasses import dataclass

from nanoraster.geometry.point import Point
from nanoraster.geometry.range import Range
from nanoraster.geometry.range2d import Range2d


@dataclass(frozen=True)
class ImageMapping:
    """Pair of equally sized, in-bounds regions in a source and a destination image.

    ``shift`` is the difference of the requested regions' starting points, so
    ``dst == src + shift`` always holds.
    """

    src: Range2d
    dst: Range2d
    shift: Point

    @staticmethod
    def create(
        input_range: Range2d,
        output_range: Range2d,
        input_bounds: Range2d,
        output_bounds: Range2d,
    ) -> "ImageMapping":
        """
        Clip a requested source/destination region pair against both images.

        Args:
            input_range: Requested region in the source image
            output_range: Requested region in the destination image
            input_bounds: Whole source image region
            output_bounds: Whole destination image region

        Returns:
            Mapping whose ``src`` and ``dst`` have the same width and height;
            both are empty when the regions do not overlap the images.
        """
        shift = output_range.start() - input_range.start()

        src = (
            input_range.intersect(input_bounds)
            .intersect(output_bounds - shift)
            .intersect(output_range - shift)
        )

        if src.is_empty():
            # Collapse both axes so width and height read as zero on both sides
            src = Range2d(Range(src.x.start, src.x.start), Range(src.y.start, src.y.start))

        return ImageMapping(src=src, dst=src + shift, shift=shift)

    def is_empty(self) -> bool:
        return self.src.is_empty()
