"""Tests for mapping requested regions onto two images (pure Python)."""

from __future__ import annotations

import itertools
import unittest

from nanoraster.geometry import ImageMapping, Point, Range2d


def _region(x0: int, x1: int, y0: int, y1: int) -> Range2d:
    return Range2d.new(range(x0, x1), range(y0, y1))


class TestImageMapping(unittest.TestCase):
    def test_same_size_images(self) -> None:
        bounds = _region(0, 4, 0, 3)
        mapping = ImageMapping.create(bounds, bounds, bounds, bounds)
        self.assertEqual(mapping.src, bounds)
        self.assertEqual(mapping.dst, bounds)
        self.assertEqual(mapping.shift, Point(0, 0))
        self.assertFalse(mapping.is_empty())

    def test_output_moved_right_clips_last_column(self) -> None:
        input_bounds = _region(0, 4, 0, 3)
        output_bounds = _region(0, 5, 0, 4)
        mapping = ImageMapping.create(
            input_bounds, input_bounds + Point(2, 0), input_bounds, output_bounds
        )
        self.assertEqual(mapping.shift, Point(2, 0))
        self.assertEqual(mapping.src, _region(0, 3, 0, 3))
        self.assertEqual(mapping.dst, _region(2, 5, 0, 3))

    def test_output_moved_up_clips_first_line(self) -> None:
        input_bounds = _region(0, 4, 0, 3)
        output_bounds = _region(0, 5, 0, 4)
        mapping = ImageMapping.create(
            input_bounds, input_bounds + Point(0, -1), input_bounds, output_bounds
        )
        self.assertEqual(mapping.src, _region(0, 4, 1, 3))
        self.assertEqual(mapping.dst, _region(0, 4, 0, 2))

    def test_disjoint_regions_are_empty(self) -> None:
        bounds = _region(0, 4, 0, 3)
        mapping = ImageMapping.create(bounds, bounds + Point(10, 0), bounds, bounds)
        self.assertTrue(mapping.is_empty())
        self.assertEqual(mapping.src.width(), mapping.dst.width())
        self.assertEqual(mapping.src.height(), mapping.dst.height())
        self.assertEqual(mapping.src.width() * mapping.src.height(), 0)

    def test_region_outside_input_is_empty(self) -> None:
        bounds = _region(0, 4, 0, 3)
        mapping = ImageMapping.create(_region(-9, -5, 0, 3), bounds, bounds, bounds)
        self.assertTrue(mapping.is_empty())

    def test_shape_invariance(self) -> None:
        regions = [
            _region(0, 4, 0, 3),
            _region(-2, 3, 1, 6),
            _region(3, 9, -4, 2),
            _region(1, 1, 0, 5),
            _region(-8, -3, -8, -3),
            _region(0, 10, 0, 10),
        ]
        bounds = [_region(0, 4, 0, 3), _region(0, 5, 0, 4), _region(0, 1, 0, 1), _region(0, 0, 0, 0)]

        for input_range, output_range, input_bounds, output_bounds in itertools.product(
            regions, regions, bounds, bounds
        ):
            mapping = ImageMapping.create(input_range, output_range, input_bounds, output_bounds)
            self.assertEqual(mapping.src.width(), mapping.dst.width())
            self.assertEqual(mapping.src.height(), mapping.dst.height())
            if not mapping.is_empty():
                self.assertEqual(mapping.src.intersect(input_bounds), mapping.src)
                self.assertEqual(mapping.dst.intersect(output_bounds), mapping.dst)
                self.assertEqual(mapping.dst, mapping.src + mapping.shift)


if __name__ == "__main__":
    unittest.main()
