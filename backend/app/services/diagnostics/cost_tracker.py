from __future__ import annotations

"""backend/app/services/diagnostics/cost_tracker.py

Per-run cost accounting for the LLM and image providers a generation run
calls. Like the StageProfiler, a CostTracker belongs to exactly one run.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict

logger = logging.getLogger(__name__)

_PER_MILLION = 1_000_000

# USD per token
PRICING: Dict[str, Dict[str, float]] = {
    "claude": {"input": 3.00 / _PER_MILLION, "output": 15.00 / _PER_MILLION},
    "perplexity": {"input": 1.00 / _PER_MILLION, "output": 5.00 / _PER_MILLION},
    "gemini": {"input": 1.25 / _PER_MILLION, "output": 10.00 / _PER_MILLION},
    "gemini_flash": {"input": 0.15 / _PER_MILLION, "output": 0.60 / _PER_MILLION},
    "gemini_flash_lite": {"input": 0.075 / _PER_MILLION, "output": 0.30 / _PER_MILLION},
    "gemini_chat": {"input": 0.075 / _PER_MILLION, "output": 0.30 / _PER_MILLION},
}

# USD per generated image
IMAGE_PRICING: Dict[str, float] = {
    "flux": 0.003,
}


@dataclass
class ProviderUsage:
    input_tokens: int = 0
    output_tokens: int = 0
    images: int = 0
    cost: float = 0.0


class CostTracker:
    """Accumulate token/image usage and cost per provider."""

    def __init__(self) -> None:
        self._usage: Dict[str, ProviderUsage] = {
            name: ProviderUsage() for name in (*PRICING, *IMAGE_PRICING)
        }
        self.total: float = 0.0

    def track_tokens(self, provider: str, input_tokens: int, output_tokens: int) -> float:
        """Record a completion call and return its cost.

        Unknown providers are logged and cost nothing.
        """
        pricing = PRICING.get(provider)
        if pricing is None:
            logger.debug("No token pricing for provider %s; ignoring usage", provider)
            return 0.0

        cost = input_tokens * pricing["input"] + output_tokens * pricing["output"]
        usage = self._usage[provider]
        usage.input_tokens += input_tokens
        usage.output_tokens += output_tokens
        usage.cost += cost
        self.total += cost

        logger.info(
            "%s: %s in + %s out = $%.4f", provider, input_tokens, output_tokens, cost
        )
        return cost

    def track_image(self, provider: str = "flux") -> float:
        price = IMAGE_PRICING.get(provider)
        if price is None:
            logger.debug("No image pricing for provider %s; ignoring usage", provider)
            return 0.0

        usage = self._usage[provider]
        usage.images += 1
        usage.cost += price
        self.total += price

        logger.info("%s: 1 image = $%.4f", provider, price)
        return price

    def usage(self, provider: str) -> ProviderUsage:
        return self._usage.get(provider) or ProviderUsage()

    def breakdown(self) -> Dict[str, ProviderUsage]:
        """Providers with any recorded activity, in pricing order."""
        return {
            name: usage
            for name, usage in self._usage.items()
            if usage.cost > 0 or usage.images > 0
        }

    @property
    def total_display(self) -> str:
        return f"{self.total:.4f}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "providers": {name: asdict(u) for name, u in self.breakdown().items()},
            "total": self.total_display,
        }
