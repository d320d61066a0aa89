"""Run context for filter invocations: structured log lines and stage timings."""

from __future__ import annotations

import contextlib
from dataclasses import dataclass, field
from datetime import datetime, timezone
import time
import uuid
from typing import Any, ContextManager, Dict, Iterator, List, Optional

from nanoraster.config import FilterConfig
from nanoraster.utils.progress import progress_print

LOG_PREFIX = "[nanoraster]"


@dataclass
class StageTiming:
    """Timing information for one filter stage."""

    stage: str
    elapsed_ms: float
    started_utc: str

    def to_dict(self) -> Dict[str, object]:
        """Return a JSON-serializable dict."""
        return {
            "stage": self.stage,
            "elapsed_ms": self.elapsed_ms,
            "started_utc": self.started_utc,
        }


@dataclass
class FilterContext:
    """Execution context passed to filters that should report what they do.

    Filters called without a context stay silent; with one, they time their
    passes and, when ``config.log_plans`` is set, log every plan they build.
    """

    run_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    config: FilterConfig = field(default_factory=FilterConfig)
    echo: bool = True
    stages: List[StageTiming] = field(default_factory=list)
    logs: List[Dict[str, object]] = field(default_factory=list)

    def log(self, level: str, message: str, **fields: Any) -> str:
        """Emit a structured log line tagged with the current run_id."""
        ordered_fields = " ".join(f"{key}={fields[key]}" for key in sorted(fields))
        line = f"{LOG_PREFIX} run_id={self.run_id} level={level} msg={message}"
        if ordered_fields:
            line = f"{line} {ordered_fields}"
        if self.echo:
            progress_print(line)
        self.logs.append({"level": level, "message": message, **fields})
        return line

    @contextlib.contextmanager
    def time_block(self, stage: str) -> Iterator[None]:
        """Context manager that records elapsed time for a stage."""
        start = time.perf_counter()
        started_utc = datetime.now(timezone.utc).isoformat()
        try:
            yield
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000.0
            self.stages.append(
                StageTiming(stage=stage, elapsed_ms=elapsed_ms, started_utc=started_utc)
            )

    def progress_enabled(self, iterations: int) -> bool:
        return self.config.progress_enabled(iterations)

    def to_dict(self) -> Dict[str, object]:
        """Return a JSON-serializable dict."""
        return {
            "run_id": self.run_id,
            "config": self.config.to_dict(),
            "stages": [stage.to_dict() for stage in self.stages],
            "logs": list(self.logs),
        }


def time_stage(context: Optional[FilterContext], stage: str) -> ContextManager[None]:
    """Time ``stage`` on ``context``, or do nothing when there is no context."""
    if context is None:
        return contextlib.nullcontext()
    return context.time_block(stage)
