"""Two pass (horizontal then vertical) separable convolution."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from nanoraster.filter.convolution.horizontal import horizontal_filter
from nanoraster.filter.convolution.operator import (
    Operator,
    convolution_operator,
    initial_value,
)
from nanoraster.filter.convolution.plan import validate_kernel
from nanoraster.filter.convolution.vertical import vertical_filter
from nanoraster.image.buffer import RasterBuffer, pixel_dtype
from nanoraster.image.contracts import ReadableRaster, WritableRaster
from nanoraster.utils.filter_context import FilterContext, time_stage


def separable_filter(
    input: ReadableRaster,
    output: WritableRaster,
    kernel_x: Sequence[Any],
    kernel_y: Sequence[Any],
    operator: Operator = convolution_operator,
    *,
    intermediate_fill: Any = None,
    context: Optional[FilterContext] = None,
) -> None:
    """
    Filter ``input`` with ``kernel_x`` along lines, then ``kernel_y`` along columns.

    The horizontal pass writes into an intermediate image of the input's size
    and pixel type; the vertical pass accumulates into ``output``. Both
    kernels are validated before either pass runs.

    Args:
        input: Input read-only image
        output: Output mutable image, must not be ``input``
        kernel_x: Kernel of the horizontal pass, odd number of elements
        kernel_y: Kernel of the vertical pass, odd number of elements
        operator: Operator between input, output and kernel value
        intermediate_fill: Initial intermediate pixel value, defaults to the
            operator's neutral value (0 for convolution, the pixel type's
            lowest value for ``maximum_operator``, highest for ``minimum_operator``)
        context: Optional run context for logging, timing and progress

    Raises:
        ValueError: If either kernel is even-sized or ``input`` is ``output``
    """
    validate_kernel(kernel_x)
    validate_kernel(kernel_y)
    if input is output:
        raise ValueError("Filtering an image into itself is not supported")

    dtype = pixel_dtype(input)
    if intermediate_fill is None:
        intermediate_fill = initial_value(operator, dtype)

    with time_stage(context, "separable_filter"):
        intermediate = RasterBuffer.new(input.size(), fill=intermediate_fill, dtype=dtype)
        horizontal_filter(input, intermediate, kernel_x, operator, context=context)
        vertical_filter(intermediate, output, kernel_y, operator, context=context)
