"""
Tests for per-run stage profiling.

Run with: pytest backend/tests/test_stage_profiler.py -v
"""

import pytest

from app.services.diagnostics.stage_profiler import (
    PerformanceReport,
    Stage,
    StageProfiler,
    StageSummary,
)


class TestStageTransitions:
    """Tests for the idle/open state machine."""

    def test_starts_idle(self, clock):
        profiler = StageProfiler(clock=clock)
        assert profiler.current_stage is None
        assert profiler.stages == ()
        assert profiler.start_time == clock.now

    def test_start_and_end(self, clock):
        profiler = StageProfiler(clock=clock)
        profiler.start_stage("research")
        assert profiler.current_stage == "research"
        clock.advance(1500)
        profiler.end_stage()

        assert profiler.current_stage is None
        (stage,) = profiler.stages
        assert stage.name == "research"
        assert stage.duration == 1500
        assert stage.end - stage.start == 1500
        assert stage.skipped is False

    def test_start_implicitly_closes_previous(self, clock):
        profiler = StageProfiler(clock=clock)
        profiler.start_stage("content_analysis")
        clock.advance(200)
        profiler.start_stage("topic_extraction")
        clock.advance(300)
        profiler.start_stage("research")

        assert [s.name for s in profiler.stages] == ["content_analysis", "topic_extraction"]
        assert [s.duration for s in profiler.stages] == [200, 300]
        assert profiler.current_stage == "research"

    def test_end_when_idle_is_noop(self, clock):
        profiler = StageProfiler(clock=clock)
        profiler.end_stage()
        profiler.end_stage()
        assert profiler.stages == ()

    def test_skip_when_idle(self, clock):
        profiler = StageProfiler(clock=clock)
        profiler.skip("research")
        assert profiler.stages == (Stage(name="research", duration=0, skipped=True),)
        assert profiler.current_stage is None

    def test_skip_closes_open_stage(self, clock):
        profiler = StageProfiler(clock=clock)
        profiler.start_stage("fact_validation")
        clock.advance(50)
        profiler.skip("fix_errors")

        first, second = profiler.stages
        assert first.name == "fact_validation"
        assert first.duration == 50
        assert second.name == "fix_errors"
        assert second.duration == 0
        assert second.skipped is True
        assert second.start is None and second.end is None
        assert profiler.current_stage is None

    def test_close_all_is_idempotent(self, clock):
        profiler = StageProfiler(clock=clock)
        profiler.start_stage("style_cleanup")
        clock.advance(10)
        profiler.close_all()
        once = profiler.stages
        clock.advance(10)
        profiler.close_all()
        assert profiler.stages == once

    def test_close_all_when_idle(self, clock):
        profiler = StageProfiler(clock=clock)
        profiler.close_all()
        assert profiler.stages == ()

    def test_stage_names_need_not_be_unique(self, clock):
        profiler = StageProfiler(clock=clock)
        profiler.skip("rewrite")
        profiler.skip("rewrite")
        assert [s.name for s in profiler.stages] == ["rewrite", "rewrite"]

    def test_backwards_clock_clamps_to_zero(self, clock):
        profiler = StageProfiler(clock=clock)
        profiler.start_stage("visual_prompts")
        clock.advance(-5)
        profiler.end_stage()
        assert profiler.stages[0].duration == 0

    def test_stages_are_frozen(self, clock):
        profiler = StageProfiler(clock=clock)
        profiler.skip("research")
        with pytest.raises(AttributeError):
            profiler.stages[0].duration = 10  # type: ignore[misc]


class TestStageContextManager:
    def test_times_block(self, clock):
        profiler = StageProfiler(clock=clock)
        with profiler.stage("hook_generation"):
            clock.advance(700)
        assert profiler.stages[0].duration == 700
        assert profiler.current_stage is None

    def test_closes_on_error(self, clock):
        profiler = StageProfiler(clock=clock)
        with pytest.raises(RuntimeError):
            with profiler.stage("script_writing"):
                clock.advance(40)
                raise RuntimeError("Script failed")
        assert profiler.stages[0].name == "script_writing"
        assert profiler.stages[0].duration == 40


class TestReport:
    """Tests for get_report()."""

    def test_empty_report(self, clock):
        profiler = StageProfiler(clock=clock)
        clock.advance(1234)
        report = profiler.get_report()
        assert report == PerformanceReport(
            stages=(), total_ms=1234, total_s="1.23", slowest="none"
        )

    def test_stage_summaries(self, clock):
        profiler = StageProfiler(clock=clock)
        profiler.start_stage("research")
        clock.advance(2346)
        profiler.skip("rewrite")

        report = profiler.get_report()
        assert report.stages == (
            StageSummary(name="research", duration_ms=2346, duration_s="2.35", skipped=False),
            StageSummary(name="rewrite", duration_ms=0, duration_s="0.00", skipped=True),
        )

    def test_open_stage_excluded_but_counted_in_total(self, clock):
        profiler = StageProfiler(clock=clock)
        profiler.start_stage("research")
        clock.advance(100)
        profiler.start_stage("hook_generation")
        clock.advance(900)

        report = profiler.get_report()
        assert [s.name for s in report.stages] == ["research"]
        assert report.total_ms == 1000
        assert report.slowest == "research"
        assert profiler.current_stage == "hook_generation"

    def test_report_does_not_mutate(self, clock):
        profiler = StageProfiler(clock=clock)
        profiler.start_stage("research")
        clock.advance(100)
        profiler.get_report()
        assert profiler.current_stage == "research"
        assert profiler.stages == ()

    def test_slowest_first_of_ties_wins(self, clock):
        profiler = StageProfiler(clock=clock)
        for name, ms in [("a", 100), ("b", 300), ("c", 300), ("d", 200)]:
            profiler.start_stage(name)
            clock.advance(ms)
        profiler.close_all()
        assert profiler.get_report().slowest == "b"

    def test_slowest_none_when_all_skipped(self, clock):
        profiler = StageProfiler(clock=clock)
        profiler.skip("content_analysis")
        profiler.skip("research")
        assert profiler.get_report().slowest == "none"

    def test_slowest_none_when_all_zero(self, clock):
        profiler = StageProfiler(clock=clock)
        profiler.start_stage("instant")
        profiler.end_stage()
        assert profiler.get_report().slowest == "none"

    def test_to_dict(self, clock):
        profiler = StageProfiler(clock=clock)
        profiler.start_stage("research")
        clock.advance(1000)
        profiler.close_all()
        assert profiler.get_report().to_dict() == {
            "stages": [
                {"name": "research", "duration_ms": 1000, "duration_s": "1.00", "skipped": False}
            ],
            "total_ms": 1000,
            "total_s": "1.00",
            "slowest": "research",
        }

    def test_wall_clock_default(self):
        profiler = StageProfiler()
        report = profiler.get_report()
        assert report.total_ms >= 0
        assert report.slowest == "none"

    def test_profilers_are_independent(self, clock):
        first = StageProfiler(clock=clock)
        second = StageProfiler(clock=clock)
        first.skip("research")
        assert second.stages == ()
