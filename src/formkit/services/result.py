"""Return types shared by every formkit service.

A field that fails validation is a successful operation: ``ok`` stays
True and the verdict lives in ``data`` (``valid`` plus ``message`` for one
field, ``errors`` for a form). ``ok=False`` is reserved for requests that
could not be evaluated at all, tagged with an :class:`ErrorCode`.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Why a service could not evaluate its input."""

    INVALID_INPUT = "INVALID_INPUT"  # unparseable time value
    UNKNOWN_RULE = "UNKNOWN_RULE"
    INVALID_POLICY = "INVALID_POLICY"
    INVALID_FORM = "INVALID_FORM"


class ServiceError(BaseModel):
    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service call.

    Attributes:
        ok: Whether the request could be evaluated.
        op: Operation name (``"ago"``, ``"check_email"``, ...).
        data: Operation payload.
        warnings: Non-fatal notes, printed to stderr by the CLI.
        error: Set exactly when ``ok`` is False.
        meta: Extra context shown with ``--verbose``.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, code: ErrorCode, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))

    def failures(self) -> list[str]:
        """User-facing validation messages carried in ``data``.

        Empty for passing checks and for results that are not validations.
        """
        if self.data.get("valid") is not False:
            return []
        errors = self.data.get("errors")
        if isinstance(errors, dict):
            return [str(message) for message in errors.values()]
        message = self.data.get("message")
        return [str(message)] if message else []
