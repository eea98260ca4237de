# backend/app/services/reports/__init__.py
from __future__ import annotations

"""
Reporting utilities for pipeline runs.

This package provides:
- a box-drawn table for a PerformanceReport
- a cost breakdown for a CostTracker

High-level helpers exposed:

- render_performance_table(report) -> str
- log_performance_report(report, log=None) -> None
- render_cost_breakdown(costs) -> str
- log_cost_breakdown(costs, log=None) -> None
"""

from .cost_breakdown import (  # noqa: F401
    log_cost_breakdown,
    render_cost_breakdown,
)
from .performance_table import (  # noqa: F401
    log_performance_report,
    render_performance_table,
)
