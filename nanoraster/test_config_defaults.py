"""Tests for config defaults and round trips (pure Python)."""

from __future__ import annotations

import json
import unittest

from nanoraster.config import FilterConfig, NanoRasterConfig


class TestConfigDefaults(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = NanoRasterConfig()
        self.assertEqual(cfg.raster.default_dtype, "float64")
        self.assertEqual(cfg.raster.row_alignment, 1)
        self.assertFalse(cfg.filter.show_progress)
        self.assertEqual(cfg.filter.progress_min_lines, 256)
        self.assertFalse(cfg.filter.log_plans)

    def test_validate(self) -> None:
        cfg = NanoRasterConfig()
        cfg.validate()

    def test_to_dict_json_safe(self) -> None:
        json.dumps(NanoRasterConfig().to_dict())

    def test_from_dict_round_trip(self) -> None:
        cfg = NanoRasterConfig.from_dict(
            {"raster": {"default_dtype": "uint8"}, "filter": {"log_plans": True}}
        )
        self.assertEqual(cfg.raster.default_dtype, "uint8")
        self.assertEqual(cfg.raster.row_alignment, 1)
        self.assertTrue(cfg.filter.log_plans)
        self.assertEqual(NanoRasterConfig.from_dict(cfg.to_dict()), cfg)

    def test_from_empty_dict(self) -> None:
        self.assertEqual(NanoRasterConfig.from_dict(None), NanoRasterConfig())
        self.assertEqual(NanoRasterConfig.from_dict({}), NanoRasterConfig())

    def test_progress_enabled(self) -> None:
        self.assertFalse(FilterConfig().progress_enabled(10_000))
        cfg = FilterConfig(show_progress=True, progress_min_lines=100)
        self.assertFalse(cfg.progress_enabled(99))
        self.assertTrue(cfg.progress_enabled(100))


if __name__ == "__main__":
    unittest.main()
