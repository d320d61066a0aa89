"""Algorithms directly modifying or transforming images."""

from .convolution import (
    FilterStep,
    convolution_operator,
    create_filter_plan,
    horizontal_filter,
    horizontal_filter_range,
    maximum_operator,
    minimum_operator,
    separable_filter,
    vertical_filter,
    vertical_filter_range,
)
from .map import map_new, map_range
from .mirror import mirror_horizontal_new, mirror_vertical_new
from .resize import resize_nearest_new
from .update import update, update_range

__all__ = [
    "FilterStep",
    "convolution_operator",
    "create_filter_plan",
    "horizontal_filter",
    "horizontal_filter_range",
    "map_new",
    "map_range",
    "maximum_operator",
    "minimum_operator",
    "mirror_horizontal_new",
    "mirror_vertical_new",
    "resize_nearest_new",
    "separable_filter",
    "update",
    "update_range",
    "vertical_filter",
    "vertical_filter_range",
]
