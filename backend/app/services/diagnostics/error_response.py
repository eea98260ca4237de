from __future__ import annotations

"""backend/app/services/diagnostics/error_response.py

Glue between a pipeline endpoint and the diagnostics core.

- PipelineError: raise it to report a kind the classifier cannot detect
  (bad input, exhausted quota)
- handle_pipeline_failure: turn whatever an endpoint caught into an HTTP
  status and the localized error envelope
- finalize_run: close the profiler, log the run's tables and emit metrics
"""

import logging
from typing import Any

from app import schemas
from app.config import get_settings
from app.services import statsig_client
from app.services.diagnostics.cost_tracker import CostTracker
from app.services.diagnostics.error_classifier import (
    describe_error,
    detect_error_type,
    get_localized_message,
    resolve_locale,
)
from app.services.diagnostics.error_messages import ErrorKind
from app.services.diagnostics.stage_profiler import PerformanceReport, StageProfiler
from app.services.reports import log_cost_breakdown, log_performance_report

logger = logging.getLogger(__name__)


class PipelineError(Exception):
    """A pipeline failure whose ErrorKind is already known."""

    def __init__(
        self,
        kind: ErrorKind,
        *,
        http_status: int = 400,
        technical: str | None = None,
        locale: str | None = None,
    ):
        self.kind = kind
        self.http_status = http_status
        self.technical = technical
        self.locale = locale
        super().__init__(technical or kind.value)


def resolve_http_status(raw: Any) -> int:
    """HTTP status carried by the failure, or 500 when it has none."""
    if isinstance(raw, PipelineError):
        return raw.http_status
    return describe_error(raw).status or 500


def build_error_envelope(
    kind: ErrorKind,
    locale: str | None,
    technical: str | None = None,
) -> schemas.ErrorEnvelope:
    return schemas.ErrorEnvelope(
        error=schemas.ErrorBody(
            code=kind,
            message=get_localized_message(kind, locale),
            technical=technical,
        )
    )


def handle_pipeline_failure(
    error: Any,
    *,
    locale: str | None,
    pipeline: str,
    expose_technical: bool | None = None,
) -> tuple[int, schemas.ErrorEnvelope]:
    """Classify ``error`` and build the response for it.

    ``expose_technical`` defaults to the configured setting; when false the
    raw error text never leaves the backend.
    """
    if expose_technical is None:
        expose_technical = get_settings().show_technical_errors

    if isinstance(error, PipelineError):
        kind = error.kind
        technical = error.technical
    else:
        kind = detect_error_type(error)
        technical = describe_error(error).message or None

    status = resolve_http_status(error)
    resolved = resolve_locale(locale or get_settings().default_locale)

    log = logger.warning if status < 500 else logger.error
    log(
        "%s failed: kind=%s status=%s detail=%s", pipeline, kind.value, status, technical
    )
    statsig_client.log_pipeline_error(kind, pipeline=pipeline, locale=resolved)

    envelope = build_error_envelope(
        kind, resolved, technical=technical if expose_technical else None
    )
    return status, envelope


def finalize_run(
    pipeline: str,
    profiler: StageProfiler,
    costs: CostTracker | None = None,
) -> PerformanceReport:
    """Close any open stage and summarize the run."""
    profiler.close_all()
    report = profiler.get_report()

    if get_settings().log_performance_reports:
        logger.info("%s finished in %ss", pipeline, report.total_s)
        log_performance_report(report)
        if costs is not None:
            log_cost_breakdown(costs)

    statsig_client.log_pipeline_performance(report, pipeline=pipeline)
    return report
