"""Horizontal (line by line) convolution filter."""

from __future__ import annotations

from typing import Any, Optional, Sequence

import numpy as np

from nanoraster.filter.convolution.operator import Operator, convolution_operator
from nanoraster.filter.convolution.plan import create_filter_plan, validate_kernel
from nanoraster.geometry.mapping import ImageMapping
from nanoraster.geometry.range2d import Range2d
from nanoraster.image.contracts import ReadableRaster, WritableRaster, raster_bounds
from nanoraster.utils.filter_context import FilterContext, time_stage
from nanoraster.utils.progress import iter_progress


def horizontal_filter(
    input: ReadableRaster,
    output: WritableRaster,
    kernel: Sequence[Any],
    operator: Operator = convolution_operator,
    *,
    context: Optional[FilterContext] = None,
) -> None:
    """
    Horizontal image filter for the whole image.

    Input image is considered infinite, replicating values of the nearest
    existing pixels. The result is accumulated into ``output`` (start from a
    zero-filled output for a plain convolution).

    Args:
        input: Input read-only image
        output: Output mutable image, must not be ``input``
        kernel: Filter kernel, must contain an odd number of elements
        operator: Operator between input, output and kernel value
        context: Optional run context for logging, timing and progress

    Example:
        >>> from nanoraster import RasterBuffer, RasterSize
        >>> src = RasterBuffer.from_flat(RasterSize(3, 1), [1, 2, 0])
        >>> dst = RasterBuffer.new_like(src)
        >>> horizontal_filter(src, dst, [0, 0, -1])
        >>> dst.line(0).tolist()
        [-1, -1, -2]
    """
    horizontal_filter_range(
        input,
        output,
        kernel,
        raster_bounds(input),
        raster_bounds(output),
        operator,
        context=context,
    )


def horizontal_filter_range(
    input: ReadableRaster,
    output: WritableRaster,
    kernel: Sequence[Any],
    input_range: Range2d,
    output_range: Range2d,
    operator: Operator = convolution_operator,
    *,
    context: Optional[FilterContext] = None,
) -> None:
    """
    Horizontal image filter for a specific region.

    Args:
        input: Input read-only image
        output: Output mutable image, must not be ``input``
        kernel: Filter kernel, must contain an odd number of elements
        input_range: Input pixel region
        output_range: Output pixel region, ``input_range`` pixels are written
            starting at its top-left corner
        operator: Operator between input, output and kernel value
        context: Optional run context for logging, timing and progress

    Raises:
        ValueError: If the kernel is even-sized or ``input`` is ``output``
    """
    validate_kernel(kernel)
    if input is output:
        raise ValueError("Filtering an image into itself is not supported")

    mapping = ImageMapping.create(
        input_range, output_range, raster_bounds(input), raster_bounds(output)
    )
    width = input.size().x
    plan = create_filter_plan(width, len(kernel), mapping.src.x, mapping.dst.x)

    if context is not None and context.config.log_plans:
        context.log(
            "debug",
            "horizontal plan",
            taps=len(plan),
            src=mapping.src,
            dst=mapping.dst,
        )

    if mapping.is_empty():
        return

    left, right = mapping.dst.x.start, mapping.dst.x.end
    lines = mapping.src.y.to_range()
    show_progress = context is not None and context.progress_enabled(len(lines))

    with time_stage(context, "horizontal_filter"):
        for line in iter_progress(
            lines, desc="horizontal", enabled=show_progress, unit="lines"
        ):
            src = input.line(line)
            dst = output.line_mut(line + mapping.shift.y)

            for step in plan:
                value = kernel[step.kernel_index]

                # Pixels left of the image repeat the first pixel
                if step.outside_start:
                    edge = np.broadcast_to(src[0:1], (step.outside_start,))
                    operator(edge, dst[left : left + step.outside_start], value)

                if not step.src_range.is_empty():
                    operator(
                        src[step.src_range.to_slice()],
                        dst[step.dst_range.to_slice()],
                        value,
                    )

                # Pixels right of the image repeat the last pixel
                if step.outside_end:
                    edge = np.broadcast_to(src[width - 1 : width], (step.outside_end,))
                    operator(edge, dst[right - step.outside_end : right], value)
