from __future__ import annotations

"""backend/app/services/diagnostics/error_classifier.py

Centralized error classification for generation pipeline failures.

This module looks at whatever the pipeline caught (an exception, an HTTP
client error, a plain dict from a worker) and assigns one ErrorKind from
the fixed taxonomy in error_messages.

The classification is:
- deterministic (no randomness, no I/O)
- text-based (pattern matching against message, code and HTTP status)
- first-match: the order of the checks below is part of the contract

Nothing here raises. Unrecognized or empty input classifies as
UNKNOWN_ERROR and unrecognized locales resolve to English.
"""

import errno
import socket
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from app.services.diagnostics.error_messages import (
    DEFAULT_LOCALE,
    ERROR_MESSAGES,
    SUPPORTED_LOCALES,
    ErrorKind,
)


@dataclass(frozen=True)
class ErrorDescription:
    """Normalized view of a raw pipeline failure."""

    message: str = ""
    code: str = ""
    status: int = 0


def _text(value: Optional[str]) -> str:
    return (value or "").strip()


def _lower(value: Optional[str]) -> str:
    return _text(value).lower()


def _contains_any(haystack: str, needles: list[str]) -> bool:
    return any(n in haystack for n in needles)


def _status(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _first_status(*candidates: Any) -> int:
    # Mirrors `status || statusCode || 0`: a zero/missing status falls through.
    for candidate in candidates:
        status = _status(candidate)
        if status:
            return status
    return 0


def _own_code(exc: BaseException) -> str:
    code = getattr(exc, "code", None)
    if isinstance(code, str) and code:
        return code
    if isinstance(exc, socket.gaierror):
        return "ENOTFOUND"
    if isinstance(exc, OSError) and exc.errno in errno.errorcode:
        return errno.errorcode[exc.errno]
    if isinstance(exc, ConnectionRefusedError):
        return "ECONNREFUSED"
    if isinstance(exc, TimeoutError):
        return "ETIMEDOUT"
    return ""


def _exception_code(exc: BaseException) -> str:
    # Client libraries wrap socket errors; follow the chain for a code.
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        code = _own_code(current)
        if code:
            return code
        current = current.__cause__ or current.__context__
    return ""


def describe_error(raw: Any) -> ErrorDescription:
    """Normalize a raw failure into an ErrorDescription.

    Accepts None, an ErrorDescription, a mapping with any of ``message``,
    ``code``, ``status``, ``statusCode`` or ``status_code``, or an exception.
    The input is only read, never modified or kept.
    """
    if raw is None:
        return ErrorDescription()
    if isinstance(raw, ErrorDescription):
        return raw

    if isinstance(raw, Mapping):
        message = raw.get("message")
        code = raw.get("code")
        return ErrorDescription(
            message=message if isinstance(message, str) else "",
            code=code if isinstance(code, str) else "",
            status=_first_status(
                raw.get("status"), raw.get("statusCode"), raw.get("status_code")
            ),
        )

    if isinstance(raw, BaseException):
        response = getattr(raw, "response", None)
        return ErrorDescription(
            message=str(raw),
            code=_exception_code(raw),
            status=_first_status(
                getattr(raw, "status", None),
                getattr(raw, "status_code", None),
                getattr(raw, "statusCode", None),
                getattr(response, "status_code", None),
            ),
        )

    return ErrorDescription()


def detect_error_type(raw: Any) -> ErrorKind:
    """Classify a pipeline failure into an ErrorKind.

    Earlier checks shadow later ones: a 429 whose message mentions a
    timeout is a TIMEOUT, not RATE_LIMITED. It never returns None; at
    minimum it returns UNKNOWN_ERROR.
    """
    description = describe_error(raw)
    message = _lower(description.message)
    code = _lower(description.code)
    status = description.status

    # 1) Network unreachable
    if _contains_any(code, ["enotfound", "econnrefused"]) or _contains_any(
        message, ["network", "econnrefused"]
    ):
        return ErrorKind.NO_INTERNET

    # 2) Timeouts
    if _contains_any(code, ["etimedout", "timeout"]) or "timeout" in message:
        return ErrorKind.TIMEOUT

    # 3) Rate limiting
    if status == 429 or _contains_any(message, ["rate limit", "too many"]):
        return ErrorKind.RATE_LIMITED

    # 4) Auth
    if status in (401, 403) or _contains_any(message, ["unauthorized", "forbidden"]):
        return ErrorKind.API_KEY_INVALID

    # 5) Generic upstream/server failure
    if status >= 500 or "server error" in message:
        return ErrorKind.SERVER_ERROR

    # 6) Pipeline phases
    if "research" in message and _contains_any(message, ["fail", "no result"]):
        return ErrorKind.RESEARCH_FAILED

    if "hook" in message and _contains_any(message, ["fail", "error"]):
        return ErrorKind.HOOK_GENERATION_FAILED

    if "script" in message and _contains_any(message, ["fail", "error"]):
        return ErrorKind.SCRIPT_GENERATION_FAILED

    return ErrorKind.UNKNOWN_ERROR


def resolve_locale(locale: Any) -> str:
    """Return ``locale`` if supported, else the default (English)."""
    if isinstance(locale, str) and locale in SUPPORTED_LOCALES:
        return locale
    return DEFAULT_LOCALE


def _kind(value: Any) -> ErrorKind | None:
    if isinstance(value, ErrorKind):
        return value
    if isinstance(value, str):
        try:
            return ErrorKind(value)
        except ValueError:
            return None
    return None


def get_localized_message(kind: Any, locale: Any = None) -> str:
    """Return the user-facing message for ``kind`` in ``locale``.

    An unsupported locale resolves to English first. An unknown kind then
    falls back to UNKNOWN_ERROR in the *resolved* locale, so French callers
    still get French text.
    """
    resolved = resolve_locale(locale)
    messages = ERROR_MESSAGES.get(_kind(kind)) or ERROR_MESSAGES[ErrorKind.UNKNOWN_ERROR]
    return messages[resolved]
