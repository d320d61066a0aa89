"""Boundary-replicating convolution filters built on a shared per-tap plan."""

from .horizontal import horizontal_filter, horizontal_filter_range
from .operator import (
    convolution_operator,
    initial_value,
    maximum_operator,
    minimum_operator,
)
from .plan import FilterStep, create_filter_plan, validate_kernel
from .separable import separable_filter
from .vertical import vertical_filter, vertical_filter_range

__all__ = [
    "FilterStep",
    "convolution_operator",
    "create_filter_plan",
    "horizontal_filter",
    "horizontal_filter_range",
    "initial_value",
    "maximum_operator",
    "minimum_operator",
    "separable_filter",
    "validate_kernel",
    "vertical_filter",
    "vertical_filter_range",
]
