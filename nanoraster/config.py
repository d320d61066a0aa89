"""Configuration models for raster allocation and filter execution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

import numpy as np


@dataclass
class RasterConfig:
    """Configuration for allocating new raster buffers."""

    default_dtype: str = "float64"
    row_alignment: int = 1

    def validate(self) -> None:
        """Validate configuration values."""
        try:
            np.dtype(self.default_dtype)
        except TypeError as exc:
            raise ValueError(
                f"default_dtype must be a numpy dtype name, got {self.default_dtype!r}"
            ) from exc
        if self.row_alignment < 1:
            raise ValueError("row_alignment must be >= 1")

    def to_dict(self) -> Dict[str, object]:
        """Return a JSON-serializable dict."""
        return {
            "default_dtype": self.default_dtype,
            "row_alignment": self.row_alignment,
        }


@dataclass
class FilterConfig:
    """Configuration for progress reporting and logging of filter runs."""

    show_progress: bool = False
    progress_min_lines: int = 256
    log_plans: bool = False

    def validate(self) -> None:
        """Validate configuration values."""
        if self.progress_min_lines < 0:
            raise ValueError("progress_min_lines must be >= 0")

    def to_dict(self) -> Dict[str, object]:
        """Return a JSON-serializable dict."""
        return {
            "show_progress": self.show_progress,
            "progress_min_lines": self.progress_min_lines,
            "log_plans": self.log_plans,
        }

    def progress_enabled(self, iterations: int) -> bool:
        """Whether a loop of ``iterations`` steps should draw a progress bar."""
        return self.show_progress and iterations >= self.progress_min_lines


_GROUPS = {
    "raster": RasterConfig,
    "filter": FilterConfig,
}


@dataclass
class NanoRasterConfig:
    """Root configuration for the raster toolkit."""

    raster: RasterConfig = field(default_factory=RasterConfig)
    filter: FilterConfig = field(default_factory=FilterConfig)

    def validate(self) -> None:
        """Validate configuration values across groups."""
        self.raster.validate()
        self.filter.validate()

    def to_dict(self) -> Dict[str, object]:
        """Return a JSON-serializable dict matching the canonical schema."""
        return {
            "raster": self.raster.to_dict(),
            "filter": self.filter.to_dict(),
        }

    @classmethod
    def from_dict(cls, payload: Optional[Dict[str, object]]) -> "NanoRasterConfig":
        """Build and validate a config from a dict produced by ``to_dict``."""
        payload = payload or {}
        unknown = set(payload) - set(_GROUPS)
        if unknown:
            raise ValueError(f"Unknown config groups: {sorted(unknown)}")

        groups = {}
        for name, group_cls in _GROUPS.items():
            values = payload.get(name) or {}
            if not isinstance(values, dict):
                raise ValueError(f"Config group {name!r} must be a dict")
            valid_keys = set(group_cls().to_dict().keys())
            invalid = set(values) - valid_keys
            if invalid:
                raise ValueError(f"{name} has invalid keys: {sorted(invalid)}")
            groups[name] = group_cls(**values)

        cfg = cls(**groups)
        cfg.validate()
        return cfg
