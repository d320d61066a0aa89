"""Vertical (column by column) convolution filter."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from nanoraster.filter.convolution.operator import Operator, convolution_operator
from nanoraster.filter.convolution.plan import create_filter_plan, validate_kernel
from nanoraster.geometry.mapping import ImageMapping
from nanoraster.geometry.range2d import Range2d
from nanoraster.image.contracts import ReadableRaster, WritableRaster, raster_bounds
from nanoraster.utils.filter_context import FilterContext, time_stage
from nanoraster.utils.progress import iter_progress


def vertical_filter(
    input: ReadableRaster,
    output: WritableRaster,
    kernel: Sequence[Any],
    operator: Operator = convolution_operator,
    *,
    context: Optional[FilterContext] = None,
) -> None:
    """Vertical image filter for the whole image, see ``vertical_filter_range``."""
    vertical_filter_range(
        input,
        output,
        kernel,
        raster_bounds(input),
        raster_bounds(output),
        operator,
        context=context,
    )


def vertical_filter_range(
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
    Vertical image filter for a specific region.

    Rows above and below the image repeat the first and last image row. The
    operator is applied to whole row segments, one kernel tap at a time.

    Args:
        input: Input read-only image
        output: Output mutable image, must not be ``input``
        kernel: Filter kernel, must contain an odd number of elements
        input_range: Input pixel region
        output_range: Output pixel region
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
    height = input.size().y
    plan = create_filter_plan(height, len(kernel), mapping.src.y, mapping.dst.y)

    if context is not None and context.config.log_plans:
        context.log(
            "debug",
            "vertical plan",
            taps=len(plan),
            src=mapping.src,
            dst=mapping.dst,
        )

    if mapping.is_empty():
        return

    src_columns = mapping.src.x.to_slice()
    dst_columns = mapping.dst.x.to_slice()
    top, bottom = mapping.dst.y.start, mapping.dst.y.end
    show_progress = context is not None and context.progress_enabled(mapping.src.height())

    with time_stage(context, "vertical_filter"):
        for step in iter_progress(
            plan, desc="vertical", enabled=show_progress, unit="taps"
        ):
            value = kernel[step.kernel_index]

            for extend in range(step.outside_start):
                src = input.line(0)[src_columns]
                dst = output.line_mut(top + extend)[dst_columns]
                operator(src, dst, value)

            for offset in range(step.src_range.length()):
                src = input.line(step.src_range.start + offset)[src_columns]
                dst = output.line_mut(step.dst_range.start + offset)[dst_columns]
                operator(src, dst, value)

            for extend in range(step.outside_end):
                src = input.line(height - 1)[src_columns]
                dst = output.line_mut(bottom - extend - 1)[dst_columns]
                operator(src, dst, value)
