from __future__ import annotations

"""
Pydantic schemas for request/response models.

This module is the API contract layer and depends on:
- app.services.diagnostics.error_messages.ErrorKind

It is used by:
- API routes
- app.services.diagnostics.error_response, which builds the error
  envelope returned by every failing pipeline endpoint
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.services.diagnostics.error_messages import ErrorKind


# ---------- Error Envelope ----------


class ErrorBody(BaseModel):
    code: ErrorKind
    message: str
    # Raw exception text, only populated when technical errors are exposed
    technical: Optional[str] = None


class ErrorEnvelope(BaseModel):
    success: bool = False
    error: ErrorBody


# ---------- Diagnostics ----------


class ClassifyRequest(BaseModel):
    """
    Raw failure description as the pipeline sees it.

    ``statusCode`` is accepted as an alias of ``status``; when both are
    given the first non-zero one wins.
    """

    model_config = ConfigDict(populate_by_name=True)

    message: Optional[str] = None
    code: Optional[str] = None
    status: Optional[int] = None
    status_code: Optional[int] = Field(default=None, alias="statusCode")
    locale: Optional[str] = None


class ClassifiedError(BaseModel):
    kind: ErrorKind
    locale: str
    message: str
    http_status: int


class LocalizedMessageRead(BaseModel):
    kind: str
    locale: str
    message: str


class ErrorKindInfo(BaseModel):
    kind: ErrorKind
    detectable: bool


class ValidateRequest(BaseModel):
    topic: Optional[str] = None
    duration: Optional[str] = None
    app_language: Optional[str] = Field(default=None, alias="appLanguage")

    model_config = ConfigDict(populate_by_name=True)


class ValidateResponse(BaseModel):
    valid: bool = True

