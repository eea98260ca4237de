from __future__ import annotations

from fastapi import APIRouter

from app import schemas
from app.config import get_settings
from app.services.diagnostics.error_classifier import (
    describe_error,
    detect_error_type,
    get_localized_message,
    resolve_locale,
)
from app.services.diagnostics.error_messages import DETECTABLE_KINDS, ErrorKind
from app.services.diagnostics.error_response import PipelineError, resolve_http_status
from app.services.diagnostics.input_checks import (
    check_app_language,
    check_duration,
    check_topic,
)

router = APIRouter(prefix="/diagnostics", tags=["diagnostics"])


def _locale(requested: str | None) -> str:
    return resolve_locale(requested or get_settings().default_locale)


@router.get("/error-kinds", response_model=list[schemas.ErrorKindInfo])
def list_error_kinds() -> list[schemas.ErrorKindInfo]:
    """
    Return every error kind and whether the classifier can detect it.

    Non-detectable kinds are only ever assigned by request validation or
    quota checks.
    """
    return [
        schemas.ErrorKindInfo(kind=kind, detectable=kind in DETECTABLE_KINDS)
        for kind in ErrorKind
    ]


@router.get("/messages/{kind}", response_model=schemas.LocalizedMessageRead)
def read_message(kind: str, locale: str | None = None) -> schemas.LocalizedMessageRead:
    resolved = _locale(locale)
    return schemas.LocalizedMessageRead(
        kind=kind,
        locale=resolved,
        message=get_localized_message(kind, resolved),
    )


@router.post("/classify", response_model=schemas.ClassifiedError)
def classify_error(payload: schemas.ClassifyRequest) -> schemas.ClassifiedError:
    raw = {
        "message": payload.message,
        "code": payload.code,
        "status": payload.status,
        "statusCode": payload.status_code,
    }
    description = describe_error(raw)
    kind = detect_error_type(description)
    resolved = _locale(payload.locale)
    return schemas.ClassifiedError(
        kind=kind,
        locale=resolved,
        message=get_localized_message(kind, resolved),
        http_status=resolve_http_status(description),
    )


@router.post("/validate", response_model=schemas.ValidateResponse)
def validate_request(payload: schemas.ValidateRequest) -> schemas.ValidateResponse:
    """
    Run the generation request checks without starting a pipeline.

    The first failing check is reported as an error envelope with HTTP 400.
    """
    checks = [
        check_app_language(payload.app_language),
        check_topic(payload.topic),
    ]
    if payload.duration is not None:
        checks.append(check_duration(payload.duration))

    for kind in checks:
        if kind is not None:
            raise PipelineError(kind, http_status=400, locale=payload.app_language)
    return schemas.ValidateResponse()
