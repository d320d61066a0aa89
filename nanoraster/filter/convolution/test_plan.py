"""Tests for the per-tap filter plan (pure Python)."""

from __future__ import annotations

import unittest

from nanoraster.filter.convolution.plan import FilterStep, create_filter_plan, validate_kernel
from nanoraster.geometry import Range


def _step(src, dst, kernel_index, outside_start=0, outside_end=0) -> FilterStep:
    return FilterStep(
        src_range=Range(*src),
        dst_range=Range(*dst),
        kernel_index=kernel_index,
        outside_start=outside_start,
        outside_end=outside_end,
    )


class TestCreateFilterPlan(unittest.TestCase):
    def test_kernel_size_1_image_size_3_from_0_to_3(self) -> None:
        self.assertEqual(
            create_filter_plan(3, 1, Range(0, 3), Range(0, 3)),
            [_step((0, 3), (0, 3), 0)],
        )

    def test_kernel_size_1_image_size_3_from_1_to_2(self) -> None:
        self.assertEqual(
            create_filter_plan(3, 1, Range(1, 2), Range(1, 2)),
            [_step((1, 2), (1, 2), 0)],
        )

    def test_kernel_size_3_image_size_3_from_0_to_3(self) -> None:
        self.assertEqual(
            create_filter_plan(3, 3, Range(0, 3), Range(0, 3)),
            [
                _step((0, 2), (1, 3), 2, outside_start=1),
                _step((0, 3), (0, 3), 1),
                _step((1, 3), (0, 2), 0, outside_end=1),
            ],
        )

    def test_kernel_size_3_image_size_3_from_1_to_2(self) -> None:
        self.assertEqual(
            create_filter_plan(3, 3, Range(1, 2), Range(1, 2)),
            [
                _step((0, 1), (1, 2), 2),
                _step((1, 2), (1, 2), 1),
                _step((2, 3), (1, 2), 0),
            ],
        )

    def test_kernel_size_3_image_size_1_from_0_to_1(self) -> None:
        self.assertEqual(
            create_filter_plan(1, 3, Range(0, 1), Range(0, 1)),
            [
                _step((0, 0), (1, 1), 2, outside_start=1),
                _step((0, 1), (0, 1), 1),
                _step((1, 1), (0, 0), 0, outside_end=1),
            ],
        )

    def test_shifted_destination(self) -> None:
        self.assertEqual(
            create_filter_plan(4, 3, Range(0, 4), Range(2, 6)),
            [
                _step((0, 3), (3, 6), 2, outside_start=1),
                _step((0, 4), (2, 6), 1),
                _step((1, 4), (2, 5), 0, outside_end=1),
            ],
        )

    def test_one_step_per_tap(self) -> None:
        for kernel_size in (1, 3, 5, 7, 9):
            plan = create_filter_plan(6, kernel_size, Range(0, 6), Range(0, 6))
            self.assertEqual(len(plan), kernel_size)
            self.assertEqual(
                sorted(step.kernel_index for step in plan), list(range(kernel_size))
            )
            # Increasing source position means decreasing kernel index
            self.assertEqual(plan[0].kernel_index, kernel_size - 1)
            self.assertEqual(plan[-1].kernel_index, 0)

    def test_edge_replication_counts(self) -> None:
        for length in (1, 2, 3, 5, 8):
            for kernel_size in (1, 3, 5, 7, 11):
                for start in range(length):
                    for end in range(start, length + 1):
                        src = Range(start, end)
                        plan = create_filter_plan(length, kernel_size, src, src)
                        center = (kernel_size - 1) // 2
                        for pos, step in zip(range(-center, kernel_size - center), plan):
                            reads = [i + pos for i in range(start, end)]
                            self.assertEqual(step.outside_start, sum(1 for r in reads if r < 0))
                            self.assertEqual(
                                step.outside_end, sum(1 for r in reads if r >= length)
                            )
                            self.assertEqual(
                                step.outside_start
                                + step.outside_end
                                + step.src_range.length(),
                                src.length(),
                            )
                            self.assertEqual(
                                step.src_range.length(), step.dst_range.length()
                            )

    def test_even_kernel_rejected(self) -> None:
        for kernel_size in (0, 2, 4):
            with self.assertRaises(ValueError):
                create_filter_plan(3, kernel_size, Range(0, 3), Range(0, 3))

    def test_validate_kernel(self) -> None:
        validate_kernel([1, 2, 1])
        with self.assertRaises(ValueError):
            validate_kernel([1, 1])
        with self.assertRaises(ValueError):
            validate_kernel([])


if __name__ == "__main__":
    unittest.main()
