"""
Tests for console rendering of run reports.

Run with: pytest backend/tests/test_reports.py -v
"""

import logging

from app.services.diagnostics.cost_tracker import CostTracker
from app.services.diagnostics.stage_profiler import StageProfiler
from app.services.reports import (
    log_cost_breakdown,
    log_performance_report,
    render_cost_breakdown,
    render_performance_table,
)


def _report(clock):
    profiler = StageProfiler(clock=clock)
    profiler.start_stage("research")
    clock.advance(2500)
    profiler.skip("rewrite")
    profiler.start_stage("hook_generation")
    clock.advance(1000)
    profiler.close_all()
    return profiler.get_report()


class TestPerformanceTable:
    def test_rows(self, clock):
        text = render_performance_table(_report(clock))
        lines = text.splitlines()
        assert lines[0] == "Performance Report:"
        assert any("research" in line and "2.50s" in line for line in lines)
        assert any("rewrite" in line and "(skipped)" in line for line in lines)
        assert any("TOTAL" in line and "3.50s" in line for line in lines)
        assert lines[-1] == "Slowest: research"

    def test_rows_have_equal_width(self, clock):
        lines = render_performance_table(_report(clock)).splitlines()
        table = [line for line in lines if line[:1] in "┌│├└"]
        assert len({len(line) for line in table}) == 1

    def test_no_slowest_line_when_empty(self, clock):
        report = StageProfiler(clock=clock).get_report()
        assert "Slowest" not in render_performance_table(report)

    def test_logs_each_line(self, clock, caplog):
        report = _report(clock)
        with caplog.at_level(logging.INFO):
            log_performance_report(report)
        assert "Slowest: research" in caplog.messages
        assert len(caplog.messages) == len(render_performance_table(report).splitlines())


class TestCostBreakdown:
    def test_lists_active_providers_and_total(self):
        costs = CostTracker()
        costs.track_tokens("claude", 1_000_000, 0)
        costs.track_image()
        text = render_cost_breakdown(costs)
        assert "claude:" in text
        assert "1000000 in + 0 out = $3.0000" in text
        assert "1 images = $0.0030" in text
        assert "TOTAL: $3.0030" in text
        assert "gemini" not in text

    def test_logs_to_given_logger(self, caplog):
        costs = CostTracker()
        log = logging.getLogger("tests.costs")
        with caplog.at_level(logging.INFO, logger="tests.costs"):
            log_cost_breakdown(costs, log)
        assert "TOTAL: $0.0000" in [m.strip() for m in caplog.messages]
