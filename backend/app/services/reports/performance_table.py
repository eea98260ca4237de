# backend/app/services/reports/performance_table.py
from __future__ import annotations

"""
Console rendering of a PerformanceReport.

This module is deliberately pure apart from log_performance_report: it
takes an already computed report and returns text. It never reads a
clock or touches the profiler.
"""

import logging

from app.services.diagnostics.stage_profiler import PerformanceReport

logger = logging.getLogger(__name__)

NAME_WIDTH = 27
TIME_WIDTH = 9


def _rule(left: str, middle: str, right: str) -> str:
    return f"{left}{'─' * (NAME_WIDTH + 2)}{middle}{'─' * (TIME_WIDTH + 2)}{right}"


def _row(name: str, value: str) -> str:
    return f"│ {name.ljust(NAME_WIDTH)} │ {value.rjust(TIME_WIDTH)} │"


def render_performance_table(report: PerformanceReport) -> str:
    lines: list[str] = ["Performance Report:"]
    lines.append(_rule("┌", "┬", "┐"))
    lines.append(_row("Stage", "Time"))
    lines.append(_rule("├", "┼", "┤"))
    for stage in report.stages:
        status = "(skipped)" if stage.skipped else f"{stage.duration_s}s"
        lines.append(_row(stage.name, status))
    lines.append(_rule("├", "┼", "┤"))
    lines.append(_row("TOTAL", f"{report.total_s}s"))
    lines.append(_rule("└", "┴", "┘"))
    if report.slowest != "none":
        lines.append(f"Slowest: {report.slowest}")
    return "\n".join(lines)


def log_performance_report(
    report: PerformanceReport, log: logging.Logger | None = None
) -> None:
    target = log or logger
    for line in render_performance_table(report).splitlines():
        target.info(line)
