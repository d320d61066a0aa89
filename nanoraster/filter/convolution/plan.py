"""Per-tap iteration plan shared by the horizontal and vertical filters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from nanoraster.geometry.range import Range


@dataclass(frozen=True)
class FilterStep:
    """A recipe for one kernel tap of a convolution filter.

    Used for both vertical and horizontal filter implementations.
    """

    src_range: Range  # pixels of one line/column of the source image
    dst_range: Range  # matching pixels of one line/column of the destination
    kernel_index: int
    outside_start: int  # destination pixels fed by the first source pixel
    outside_end: int  # destination pixels fed by the last source pixel


def check_kernel_size(kernel_size: int) -> None:
    """Reject kernel sizes without a center tap."""
    if kernel_size % 2 == 0:
        raise ValueError(
            f"Only kernels with odd number of elements are supported, got {kernel_size}"
        )


def validate_kernel(kernel: Sequence[object]) -> None:
    check_kernel_size(len(kernel))


def create_filter_plan(
    length: int,
    kernel_size: int,
    src: Range,
    dst: Range,
) -> List[FilterStep]:
    """
    Prepare the iteration plan for a filter along one axis.

    Pixels before the start or past the end of the image read the first or
    last image pixel instead. The same plan serves every line (horizontal
    filter) or column (vertical filter) of one call.

    Args:
        length: Image width for a horizontal filter, height for a vertical one
        kernel_size: Number of kernel elements, must be odd
        src: Source pixels of a line/column, within ``[0, length)``
        dst: Destination pixels, same length as ``src``

    Returns:
        One step per kernel tap, ordered by increasing source position

    Raises:
        ValueError: If ``kernel_size`` is even
    """
    check_kernel_size(kernel_size)

    center = (kernel_size - 1) // 2
    shift = dst.start - src.start

    return [
        _step(position, shift, center, length, src)
        for position in range(-center, kernel_size - center)
    ]


def _step(pos: int, shift: int, center: int, length: int, src: Range) -> FilterStep:
    extent = src.length()
    src_range = (src + pos).clip(0, length)

    return FilterStep(
        src_range=src_range,
        dst_range=src_range + (shift - pos),
        kernel_index=center - pos,
        outside_start=min(extent, max(0, -(src.start + pos))),
        outside_end=min(extent, max(0, src.end + pos - length)),
    )
