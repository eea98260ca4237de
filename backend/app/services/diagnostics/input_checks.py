from __future__ import annotations

"""backend/app/services/diagnostics/input_checks.py

Request checks for the error kinds detect_error_type never produces.

Each check returns the ErrorKind to report, or None when the value is fine.
"""

from typing import Any

from app.services.diagnostics.error_messages import SUPPORTED_LOCALES, ErrorKind

TOPIC_MIN_LENGTH = 3
TOPIC_MAX_LENGTH = 2000
SUPPORTED_DURATIONS: tuple[str, ...] = ("30", "60")


def check_topic(topic: str | None) -> ErrorKind | None:
    if not topic or len(topic) < TOPIC_MIN_LENGTH:
        return ErrorKind.TOPIC_TOO_SHORT
    if len(topic) > TOPIC_MAX_LENGTH:
        return ErrorKind.TOPIC_TOO_LONG
    return None


def check_duration(duration: Any) -> ErrorKind | None:
    if str(duration) not in SUPPORTED_DURATIONS:
        return ErrorKind.INVALID_DURATION
    return None


def check_app_language(locale: str | None) -> ErrorKind | None:
    """Reject an explicit, unsupported app language.

    A missing locale is fine; message lookups default it to English.
    """
    if locale is not None and locale not in SUPPORTED_LOCALES:
        return ErrorKind.INVALID_LANGUAGE
    return None
