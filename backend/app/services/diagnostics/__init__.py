from __future__ import annotations

"""
Diagnostics for the generation pipeline.

This package provides:
- error_messages: the ErrorKind taxonomy and its ar/en/fr message table
- error_classifier: map a raw failure to an ErrorKind and look up the
  user-facing message for it
- stage_profiler: per-run wall-clock timing of pipeline phases
- cost_tracker: per-run provider cost accounting
- input_checks: request checks for the kinds the classifier never detects
- error_response: endpoint glue (error envelopes, run finalization)

The goal is to keep error handling logic centralized and deterministic.
"""

from .error_classifier import (  # noqa: F401
    ErrorDescription,
    describe_error,
    detect_error_type,
    get_localized_message,
    resolve_locale,
)
from .error_messages import ErrorKind  # noqa: F401
from .stage_profiler import PerformanceReport, StageProfiler  # noqa: F401
