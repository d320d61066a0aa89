"""Console progress and run-context helpers."""

from .filter_context import FilterContext, StageTiming
from .progress import iter_progress, progress_print

__all__ = [
    "FilterContext",
    "StageTiming",
    "iter_progress",
    "progress_print",
]
