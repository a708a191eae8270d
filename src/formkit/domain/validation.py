"""Field validators and their composition helper.

Every validator is a pure function returning ``None`` when the value is
acceptable and a user-facing message otherwise. Bad input is reported as
data, never raised.

Format validators (email, password, phone) treat an empty string as "not
checked": required-ness is :func:`validate_required`'s job, and callers
chain the two with :func:`validate`.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import Any, Self

from pydantic import BaseModel, Field, model_validator

from formkit.domain.messages import ErrorKind, message_for

ValidationOutcome = str | None
Validator = Callable[[], ValidationOutcome]

DEFAULT_FIELD_NAME = "項目"
EMAIL_MAX_LENGTH = 254
PHONE_DIGIT_COUNTS = (10, 11)

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
# Separators users commonly type in phone numbers: hyphens, parentheses, spaces.
PHONE_SEPARATORS = re.compile(r"[-()\s]")
ASCII_DIGITS = re.compile(r"[0-9]+")
_LOWER = re.compile(r"[a-z]")
_UPPER = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"[0-9]")


class PasswordPolicy(BaseModel):
    """Strength rules applied by :func:`validate_password`."""

    model_config = {"frozen": True}

    min_length: int = Field(default=8, ge=1)
    max_length: int = 100
    require_mixed_case: bool = True
    require_number: bool = True

    @model_validator(mode="after")
    def _check_bounds(self) -> Self:
        if self.max_length < self.min_length:
            msg = f"max_length ({self.max_length}) must be >= min_length ({self.min_length})"
            raise ValueError(msg)
        return self


DEFAULT_PASSWORD_POLICY = PasswordPolicy()


def validate_required(value: Any, field_name: str = DEFAULT_FIELD_NAME) -> ValidationOutcome:
    """Reject absent values: ``None``, blank strings, and empty lists/tuples.

    ``0``, ``False``, and mappings (even empty ones) count as present.
    """
    if value is None:
        return message_for(ErrorKind.REQUIRED, field_name=field_name)
    if isinstance(value, str) and value.strip() == "":
        return message_for(ErrorKind.REQUIRED, field_name=field_name)
    if isinstance(value, (list, tuple)) and len(value) == 0:
        return message_for(ErrorKind.REQUIRED, field_name=field_name)
    return None


def validate_email(value: str) -> ValidationOutcome:
    """Loose structural email check followed by a length limit."""
    if not value:
        return None
    if EMAIL_PATTERN.fullmatch(value) is None:
        return message_for(ErrorKind.EMAIL_FORMAT)
    if len(value) > EMAIL_MAX_LENGTH:
        return message_for(ErrorKind.EMAIL_TOO_LONG)
    return None


def validate_password(
    value: str,
    policy: PasswordPolicy | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> ValidationOutcome:
    """Check *value* against *policy*, reporting only the first failure.

    Checks run in order: minimum length, maximum length, mixed case,
    digit. *policy* may be a mapping of partial settings. Keyword
    *overrides* (``min_length=5``) are applied on top of *policy*, or on
    top of the defaults when no policy is given.
    """
    if isinstance(policy, Mapping):
        policy = PasswordPolicy.model_validate(policy)
    if overrides:
        base = (policy or DEFAULT_PASSWORD_POLICY).model_dump()
        policy = PasswordPolicy.model_validate({**base, **overrides})
    elif policy is None:
        policy = DEFAULT_PASSWORD_POLICY

    if not value:
        return None

    if len(value) < policy.min_length:
        return message_for(ErrorKind.PASSWORD_TOO_SHORT, min_length=policy.min_length)
    if len(value) > policy.max_length:
        return message_for(ErrorKind.PASSWORD_TOO_LONG, max_length=policy.max_length)

    if policy.require_mixed_case and (not _LOWER.search(value) or not _UPPER.search(value)):
        return message_for(ErrorKind.PASSWORD_MIXED_CASE)

    if policy.require_number and not _DIGIT.search(value):
        return message_for(ErrorKind.PASSWORD_NUMBER)

    return None


def normalize_phone_number(value: str) -> str:
    """Strip hyphens, parentheses, and whitespace from a phone number.

    Examples:
        >>> normalize_phone_number("03(1234) 5678")
        '0312345678'
    """
    return PHONE_SEPARATORS.sub("", value)


def validate_phone_number(value: str) -> ValidationOutcome:
    """Japanese domestic phone number: 10 or 11 digits starting with 0."""
    if not value:
        return None

    digits = normalize_phone_number(value)
    if ASCII_DIGITS.fullmatch(digits) is None:
        return message_for(ErrorKind.PHONE_NOT_NUMERIC)
    if len(digits) not in PHONE_DIGIT_COUNTS:
        return message_for(ErrorKind.PHONE_LENGTH)
    if not digits.startswith("0"):
        return message_for(ErrorKind.PHONE_LEADING_ZERO)
    return None


def validate(*checks: Validator) -> ValidationOutcome:
    """Run deferred *checks* in order and return the first failure.

    Checks after the first failure are never called.

    Examples:
        >>> validate(lambda: None, lambda: "E1", lambda: "E2")
        'E1'
    """
    for check in checks:
        error = check()
        if error:
            return error
    return None
