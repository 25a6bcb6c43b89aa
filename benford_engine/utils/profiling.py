"""Profiling utilities for analysis timing budgets."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from benford_engine.utils.logging import get_logger

log = get_logger(__name__, component="profiling")


@dataclass
class Timing:
    wall: float
    cpu: float
    wall_elapsed: float = 0.0
    cpu_elapsed: float = 0.0

    @property
    def duration_ms(self) -> float:
        return round(self.wall_elapsed * 1000.0, 3)


def _now() -> Timing:
    return Timing(wall=time.perf_counter(), cpu=time.process_time())


@contextmanager
def track_time(name: str, *, warn_budget: float | None = None, error_budget: float | None = None) -> Iterator[Timing]:
    """Time the enclosed block and log it, escalating when a budget (seconds) is exceeded.

    The yielded Timing has its elapsed fields filled in once the block exits.
    """
    start = _now()
    try:
        yield start
    finally:
        end = _now()
        start.wall_elapsed = end.wall - start.wall
        start.cpu_elapsed = end.cpu - start.cpu
        level = None
        if error_budget is not None and start.wall_elapsed >= error_budget:
            level = "error"
        elif warn_budget is not None and start.wall_elapsed >= warn_budget:
            level = "warning"
        extra = {
            "segment": name,
            "duration_ms": start.duration_ms,
            "cpu_seconds": round(start.cpu_elapsed, 4),
        }
        if level:
            getattr(log, level)("Performance budget exceeded", extra=extra)
        else:
            log.debug("Segment timing", extra=extra)


__all__ = ["Timing", "track_time"]
