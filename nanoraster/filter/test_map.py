"""Tests for per-pixel map and in-place update."""

from __future__ import annotations

import unittest

import numpy as np

from nanoraster.filter import map_new, map_range, update, update_range
from nanoraster.geometry import Point, Range2d
from nanoraster.image import RasterBuffer


class TestMapRange(unittest.TestCase):
    def test_copy_into_larger_image_at_offset(self) -> None:
        input = RasterBuffer.from_flat(Point(2, 2), [1, 2, 3, 4], dtype=np.int32)
        output = RasterBuffer.new(Point(3, 3), dtype=np.int32)
        map_range(
            input,
            output,
            input.bounds(),
            Range2d.new(range(1, 3), range(1, 3)),
            lambda src, _: src,
        )
        self.assertEqual(output.to_flat().tolist(), [0, 0, 0, 0, 1, 2, 0, 3, 4])

    def test_operator_sees_destination(self) -> None:
        input = RasterBuffer.from_flat(Point(2, 1), [1, 2], dtype=np.int32)
        output = RasterBuffer.from_flat(Point(2, 1), [10, 20], dtype=np.int32)
        map_range(input, output, input.bounds(), output.bounds(), lambda src, dst: src + dst)
        self.assertEqual(output.to_flat().tolist(), [11, 22])

    def test_region_partially_outside_output(self) -> None:
        input = RasterBuffer.from_flat(Point(2, 2), [1, 2, 3, 4], dtype=np.int32)
        output = RasterBuffer.new(Point(2, 2), dtype=np.int32)
        map_range(
            input,
            output,
            input.bounds(),
            input.bounds() + Point(-1, 1),
            lambda src, _: src,
        )
        self.assertEqual(output.to_array().tolist(), [[0, 0], [2, 0]])


class TestMapNew(unittest.TestCase):
    def test_same_pixel_type(self) -> None:
        input = RasterBuffer.from_flat(Point(3, 1), [1, 2, 3], dtype=np.int16)
        result = map_new(input, lambda x: x * 2)
        self.assertEqual(result.dtype, np.int16)
        self.assertEqual(result.to_flat().tolist(), [2, 4, 6])

    def test_explicit_pixel_type(self) -> None:
        input = RasterBuffer.from_flat(Point(2, 2), [1, 2, 3, 4], dtype=np.uint8)
        result = map_new(input, lambda x: x / 2, dtype=np.float64)
        self.assertEqual(result.dtype, np.float64)
        self.assertEqual(result.to_flat().tolist(), [0.5, 1.0, 1.5, 2.0])


class TestUpdate(unittest.TestCase):
    def test_update_whole_image(self) -> None:
        image = RasterBuffer.from_flat(Point(2, 2), [10, 250, 0, 255], dtype=np.int32)
        update(image, lambda x: 255 - x)
        self.assertEqual(image.to_flat().tolist(), [245, 5, 255, 0])

    def test_update_range_is_clipped(self) -> None:
        image = RasterBuffer.new(Point(3, 2), dtype=np.int32)
        update_range(image, Range2d.new(range(1, 10), range(-5, 1)), lambda x: x + 1)
        self.assertEqual(image.to_array().tolist(), [[0, 1, 1], [0, 0, 0]])

    def test_update_outside_does_nothing(self) -> None:
        image = RasterBuffer.new(Point(2, 2), dtype=np.int32)
        update_range(image, Range2d.new(range(5, 6), range(0, 2)), lambda x: x + 1)
        self.assertEqual(image, RasterBuffer.new(Point(2, 2), dtype=np.int32))


if __name__ == "__main__":
    unittest.main()
