# backend/app/services/reports/cost_breakdown.py
from __future__ import annotations

"""
Console rendering of a run's CostTracker.
"""

import logging

from app.services.diagnostics.cost_tracker import CostTracker

logger = logging.getLogger(__name__)

LABEL_WIDTH = 17
SEPARATOR = "═" * 39


def render_cost_breakdown(costs: CostTracker) -> str:
    lines: list[str] = [SEPARATOR, "COST BREAKDOWN:"]
    for provider, usage in costs.breakdown().items():
        label = f"{provider}:".ljust(LABEL_WIDTH)
        if usage.images:
            detail = f"{usage.images} images"
        else:
            detail = f"{usage.input_tokens} in + {usage.output_tokens} out"
        lines.append(f"   {label}{detail} = ${usage.cost:.4f}")
    lines.append(f"   {'─' * 36}")
    lines.append(f"   TOTAL: ${costs.total_display}")
    lines.append(SEPARATOR)
    return "\n".join(lines)


def log_cost_breakdown(costs: CostTracker, log: logging.Logger | None = None) -> None:
    target = log or logger
    for line in render_cost_breakdown(costs).splitlines():
        target.info(line)
