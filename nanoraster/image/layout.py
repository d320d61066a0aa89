"""Image size together with the allocated line length."""

from __future__ import annotations

from dataclasses import dataclass

from nanoraster.geometry.point import RasterSize


@dataclass(frozen=True)
class RasterLayout:
    """Pixel data size and allocated data size of a raster buffer."""

    size: RasterSize
    stride: int  # allocated line width, may exceed size.x for alignment

    def __post_init__(self):
        if self.size.x < 0 or self.size.y < 0:
            raise ValueError(f"Raster size must be non-negative, got {self.size}")
        if self.stride < self.size.x:
            raise ValueError(
                f"Stride {self.stride} is smaller than raster width {self.size.x}"
            )

    @staticmethod
    def aligned(size: RasterSize, alignment: int) -> "RasterLayout":
        """Layout whose stride is rounded up to a multiple of ``alignment`` pixels."""
        if alignment < 1:
            raise ValueError("alignment must be >= 1")
        stride = -(-size.x // alignment) * alignment
        return RasterLayout(size=size, stride=stride)

    def data_length(self) -> int:
        """Number of allocated pixels."""
        return self.size.y * self.stride

    def line_start(self, line: int) -> int:
        return line * self.stride

    def assert_data_size_correct(self, data_size: int) -> None:
        if data_size != self.data_length():
            raise ValueError(
                f"Buffer of length {data_size} cannot be used as an image "
                f"{self.size.x} X {self.size.y} with stride {self.stride}, "
                f"correct length should be {self.data_length()}."
            )
