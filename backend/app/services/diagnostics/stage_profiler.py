from __future__ import annotations

"""backend/app/services/diagnostics/stage_profiler.py

Wall-clock profiling of one generation pipeline run.

A StageProfiler is created at the start of a run, told about every phase
boundary, and asked for a PerformanceReport at the end. It holds no
process-wide state; every run owns its own instance.

Only closed or skipped stages appear in the report. A stage that is
still open when get_report() is called is left out of ``stages`` (its
time still counts towards ``total_ms``), so callers should call
close_all() first.
"""

import time
from contextlib import contextmanager
from dataclasses import asdict, dataclass, replace
from typing import Any, Callable, Iterator

Clock = Callable[[], int]


def _wall_clock_ms() -> int:
    return int(time.time() * 1000)


def _seconds(ms: int) -> str:
    return f"{ms / 1000:.2f}"


@dataclass(frozen=True)
class Stage:
    """One measured (or skipped) pipeline phase."""

    name: str
    start: int | None = None
    end: int | None = None
    duration: int | None = None
    skipped: bool = False


@dataclass(frozen=True)
class StageSummary:
    name: str
    duration_ms: int
    duration_s: str
    skipped: bool


@dataclass(frozen=True)
class PerformanceReport:
    """Snapshot of a profiler at the time get_report() was called."""

    stages: tuple[StageSummary, ...]
    total_ms: int
    total_s: str
    slowest: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "stages": [asdict(s) for s in self.stages],
            "total_ms": self.total_ms,
            "total_s": self.total_s,
            "slowest": self.slowest,
        }


class StageProfiler:
    """Track named, timed phases for a single pipeline run.

    States:
    - idle: no stage open
    - open: ``current_stage`` is being timed

    start_stage() and skip() silently close an open stage first.
    end_stage() and close_all() are no-ops when idle.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock: Clock = clock or _wall_clock_ms
        self._stages: list[Stage] = []
        self._current: Stage | None = None
        self.start_time: int = self._clock()

    @property
    def current_stage(self) -> str | None:
        return self._current.name if self._current else None

    @property
    def stages(self) -> tuple[Stage, ...]:
        return tuple(self._stages)

    def start_stage(self, name: str) -> None:
        if self._current is not None:
            self.end_stage()
        self._current = Stage(name=name, start=self._clock())

    def end_stage(self) -> None:
        if self._current is None:
            return
        end = self._clock()
        start = self._current.start or 0
        self._stages.append(
            replace(self._current, end=end, duration=max(0, end - start))
        )
        self._current = None

    def skip(self, name: str) -> None:
        if self._current is not None:
            self.end_stage()
        self._stages.append(Stage(name=name, duration=0, skipped=True))

    def close_all(self) -> None:
        if self._current is not None:
            self.end_stage()

    @contextmanager
    def stage(self, name: str) -> Iterator[None]:
        """Time the body of a ``with`` block as stage ``name``."""
        self.start_stage(name)
        try:
            yield
        finally:
            self.end_stage()

    def get_report(self) -> PerformanceReport:
        total = self._clock() - self.start_time

        # Strict ">" so the first stage to reach the maximum wins ties.
        slowest_ms, slowest = 0, "none"
        for s in self._stages:
            duration = s.duration or 0
            if duration > slowest_ms:
                slowest_ms, slowest = duration, s.name

        return PerformanceReport(
            stages=tuple(
                StageSummary(
                    name=s.name,
                    duration_ms=s.duration or 0,
                    duration_s=_seconds(s.duration or 0),
                    skipped=s.skipped,
                )
                for s in self._stages
            ),
            total_ms=total,
            total_s=_seconds(total),
            slowest=slowest,
        )
