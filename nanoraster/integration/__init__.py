"""Adapters between raster buffers and third-party image types."""

from .pil_bridge import raster_from_pil, raster_to_pil

__all__ = [
    "raster_from_pil",
    "raster_to_pil",
]
