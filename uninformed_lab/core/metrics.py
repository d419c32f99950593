# uninformed_lab/core/metrics.py
# Benchmark bookkeeping: one SearchResult row per (domain, strategy) run, timed by MeasuredRun.
from __future__ import annotations
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional
import time, tracemalloc


@dataclass
class SearchResult:
    algo: str
    domain: str
    success: bool
    actions: List[Any] = field(default_factory=list)
    cost: Optional[float] = None
    nodes_expanded: Optional[int] = None
    time_s: Optional[float] = None
    peak_kb: Optional[int] = None
    error: Optional[str] = None

    def as_row(self) -> Dict[str, Any]:
        row = asdict(self)
        row["actions"] = [str(a) for a in self.actions]
        return row


class MeasuredRun:
    """
    Times one search and tracks the peak memory it allocates.

    Peak is measured above whatever was already traced when the block was
    entered. If tracemalloc was already running (e.g. under a profiler) it is
    left running on exit; otherwise it is stopped again. `elapsed` and
    `peak_kb` may be read inside or after the with-block.
    """
    def __init__(self) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._baseline: int = 0
        self._peak_kb: int = 0
        self._owns_tracing: bool = False
        self._active: bool = False

    def __enter__(self) -> "MeasuredRun":
        self._owns_tracing = not tracemalloc.is_tracing()
        if self._owns_tracing:
            tracemalloc.start()
        tracemalloc.reset_peak()
        self._baseline, _ = tracemalloc.get_traced_memory()
        self._active = True
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        self._peak_kb = self._current_peak_kb()
        self._active = False
        if self._owns_tracing:
            tracemalloc.stop()
        return False

    def _current_peak_kb(self) -> int:
        _, peak = tracemalloc.get_traced_memory()
        return max(self._peak_kb, (peak - self._baseline) // 1024, 0)

    @property
    def elapsed(self) -> float:
        if self.t0 is None:
            return 0.0
        end = time.perf_counter() if self.t1 is None else self.t1
        return end - self.t0

    @property
    def peak_kb(self) -> int:
        return self._current_peak_kb() if self._active else self._peak_kb

    def stamp(self, result: SearchResult) -> SearchResult:
        """Copy the measured time and peak memory onto `result` and return it."""
        result.time_s = self.elapsed
        result.peak_kb = self.peak_kb
        return result
