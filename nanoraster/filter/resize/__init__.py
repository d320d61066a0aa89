"""Image resampling."""

from .nearest import resize_nearest_new, scale_index_table

__all__ = ["resize_nearest_new", "scale_index_table"]
