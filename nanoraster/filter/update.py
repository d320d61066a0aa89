"""In-place per-pixel updates."""

from __future__ import annotations

from typing import Any, Callable

from nanoraster.geometry.range2d import Range2d
from nanoraster.image.contracts import WritableRaster, raster_bounds


def update_range(
    image: WritableRaster, region: Range2d, operator: Callable[[Any], Any]
) -> None:
    """Replace every pixel of ``region`` (clipped to the image) by ``operator(pixel)``."""
    region = region.intersect(raster_bounds(image))
    if region.is_empty():
        return

    columns = region.x.to_slice()
    for line in region.y.to_range():
        dst = image.line_mut(line)[columns]
        for col in range(len(dst)):
            dst[col] = operator(dst[col])


def update(image: WritableRaster, operator: Callable[[Any], Any]) -> None:
    """
    Update every pixel of an image in place.

    Example:
        >>> from nanoraster import RasterBuffer, RasterSize
        >>> img = RasterBuffer.from_flat(RasterSize(2, 1), [10, 250])
        >>> update(img, lambda x: 255 - x)
        >>> img.line(0).tolist()
        [245, 5]
    """
    update_range(image, raster_bounds(image), operator)
