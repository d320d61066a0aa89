"""Numpy-backed raster buffer implementing the read and write contracts."""

from __future__ import annotations

from typing import Any, Optional, Sequence, TYPE_CHECKING

import numpy as np

from nanoraster.geometry.point import RasterSize
from nanoraster.geometry.range2d import Range2d
from nanoraster.image.contracts import ReadableRaster, WritableRaster
from nanoraster.image.layout import RasterLayout

if TYPE_CHECKING:
    from nanoraster.config import RasterConfig


class RasterBuffer(WritableRaster):
    """
    Data buffer for image pixels stored in one contiguous block of memory.

    Lines are ``stride`` pixels apart; only the first ``width`` pixels of a
    line are visible through ``line``/``line_mut``. Any numpy dtype works as
    pixel type, including ``object`` for Python numbers.

    Example:
        >>> buf = RasterBuffer.from_flat(RasterSize(3, 2), [1, 2, 3, 4, 5, 6])
        >>> buf.line(1).tolist()
        [4, 5, 6]
    """

    def __init__(self, layout: RasterLayout, pixels: np.ndarray):
        layout.assert_data_size_correct(pixels.size)
        self._layout = layout
        self._pixels = pixels.reshape(-1)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def new(
        cls,
        size: RasterSize,
        fill: Any = 0,
        dtype: Any = None,
        *,
        config: Optional["RasterConfig"] = None,
    ) -> "RasterBuffer":
        """
        Create an image with every pixel set to ``fill``.

        Args:
            size: Image width and height
            fill: Initial pixel value
            dtype: Pixel type; defaults to the config's ``default_dtype`` or,
                without a config, to the dtype numpy infers for ``fill``
            config: Optional raster settings (default dtype, row alignment)

        Returns:
            New raster buffer
        """
        alignment = 1
        if config is not None:
            config.validate()
            alignment = config.row_alignment
            if dtype is None:
                dtype = config.default_dtype
        if dtype is None:
            dtype = np.asarray(fill).dtype
        return cls.aligned(size, alignment, fill=fill, dtype=dtype)

    @classmethod
    def aligned(
        cls, size: RasterSize, alignment: int, fill: Any = 0, dtype: Any = None
    ) -> "RasterBuffer":
        """Create an image whose stride is a multiple of ``alignment`` pixels."""
        layout = RasterLayout.aligned(size, alignment)
        if dtype is None:
            dtype = np.asarray(fill).dtype
        pixels = np.full(layout.data_length(), fill, dtype=dtype)
        return cls(layout, pixels)

    @classmethod
    def new_like(cls, other: ReadableRaster) -> "RasterBuffer":
        """Zero-filled image with the size and pixel type of ``other``."""
        return cls.new(other.size(), fill=0, dtype=pixel_dtype(other))

    @classmethod
    def from_flat(
        cls,
        size: RasterSize,
        data: Sequence[Any],
        stride: Optional[int] = None,
        dtype: Any = None,
    ) -> "RasterBuffer":
        """
        Wrap row-major pixel data, copying it into a new buffer.

        Raises:
            ValueError: If ``len(data)`` is not ``size.y * stride`` or the
                stride is smaller than the width
        """
        layout = RasterLayout(size=size, stride=size.x if stride is None else stride)
        pixels = np.array(data, dtype=dtype).reshape(-1)
        return cls(layout, pixels)

    @classmethod
    def from_array(cls, array: np.ndarray) -> "RasterBuffer":
        """Copy a 2D ``(height, width)`` array into a new buffer."""
        array = np.asarray(array)
        if array.ndim != 2:
            raise ValueError(f"Expected a 2D (height, width) array, got shape {array.shape}")
        height, width = array.shape
        return cls.from_flat(RasterSize(width, height), np.ascontiguousarray(array).reshape(-1))

    # ------------------------------------------------------------------
    # Contracts
    # ------------------------------------------------------------------

    def size(self) -> RasterSize:
        return self._layout.size

    def line(self, index: int) -> np.ndarray:
        view = self._pixels[self._line_slice(index)]
        view.flags.writeable = False
        return view

    def line_mut(self, index: int) -> np.ndarray:
        return self._pixels[self._line_slice(index)]

    def _line_slice(self, index: int) -> slice:
        if not 0 <= index < self._layout.size.y:
            raise IndexError(
                f"Line {index} out of range for image of height {self._layout.size.y}"
            )
        start = self._layout.line_start(index)
        return slice(start, start + self._layout.size.x)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def width(self) -> int:
        return self._layout.size.x

    def height(self) -> int:
        return self._layout.size.y

    def bounds(self) -> Range2d:
        return Range2d.from_size(self._layout.size)

    def layout(self) -> RasterLayout:
        return self._layout

    @property
    def dtype(self) -> np.dtype:
        return self._pixels.dtype

    def to_array(self) -> np.ndarray:
        """Copy of the visible pixels as a ``(height, width)`` array."""
        size = self._layout.size
        if size.y == 0:
            return np.empty((0, size.x), dtype=self.dtype)
        rows = self._pixels.reshape(size.y, self._layout.stride)
        return rows[:, : size.x].copy()

    def to_flat(self) -> np.ndarray:
        """Visible pixels in row-major order, without stride padding."""
        return self.to_array().reshape(-1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RasterBuffer):
            return NotImplemented
        return self.size() == other.size() and np.array_equal(
            self.to_array(), other.to_array()
        )

    def __repr__(self) -> str:
        size = self._layout.size
        return (
            f"RasterBuffer(size=({size.x}, {size.y}), stride={self._layout.stride}, "
            f"dtype={self.dtype})"
        )


def pixel_dtype(raster: ReadableRaster) -> np.dtype:
    """Pixel type of any raster, read from its first line when it has no ``dtype``."""
    dtype = getattr(raster, "dtype", None)
    if dtype is not None:
        return np.dtype(dtype)
    if raster.size().y > 0:
        return np.asarray(raster.line(0)).dtype
    return np.dtype(np.float64)
