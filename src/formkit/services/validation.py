"""ValidationService — field and whole-form validation.

A field failing validation is an expected outcome, so every check returns
``ok=True`` with ``valid`` and ``message`` in the data. Only malformed
requests (an unknown rule, an invalid password policy) produce ``ok=False``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import partial
from typing import Any

from pydantic import ValidationError

from formkit.domain.validation import (
    DEFAULT_FIELD_NAME,
    PasswordPolicy,
    ValidationOutcome,
    Validator,
    validate,
    validate_email,
    validate_password,
    validate_phone_number,
    validate_required,
)
from formkit.services.base import BaseService
from formkit.services.result import ErrorCode, ServiceResult

logger = logging.getLogger(__name__)

RULES = ("required", "email", "password", "phone")


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _outcome(op: str, outcome: ValidationOutcome, **data: Any) -> ServiceResult:
    return ServiceResult(
        ok=True,
        op=op,
        data={"valid": outcome is None, "message": outcome, **data},
    )


class ValidationService(BaseService):
    """Runs field validators with policy defaults taken from settings."""

    @property
    def password_policy(self) -> PasswordPolicy:
        """Password policy from the [password] config section."""
        return self._settings.password

    # ------------------------------------------------------------------
    # Single fields
    # ------------------------------------------------------------------

    def required(self, value: Any, field_name: str = DEFAULT_FIELD_NAME) -> ServiceResult:
        """Check that *value* is present; *field_name* appears in the message."""
        return _outcome("check_required", validate_required(value, field_name), field=field_name)

    def email(self, value: str) -> ServiceResult:
        """Check the shape and length of an email address."""
        return _outcome("check_email", validate_email(value))

    def password(self, value: str, **overrides: Any) -> ServiceResult:
        """Check a password against the configured policy plus *overrides*."""
        op = "check_password"
        try:
            outcome = validate_password(value, self.password_policy, **overrides)
        except ValidationError as exc:
            return self._fail(op, ErrorCode.INVALID_POLICY, f"Invalid password policy: {exc}")
        return _outcome(op, outcome)

    def phone(self, value: str) -> ServiceResult:
        """Check a Japanese domestic phone number."""
        return _outcome("check_phone", validate_phone_number(value))

    # ------------------------------------------------------------------
    # Whole forms
    # ------------------------------------------------------------------

    def _check_for(self, rule: str, value: Any, label: str) -> Validator:
        if rule == "required":
            return partial(validate_required, value, label)
        if rule == "email":
            return partial(validate_email, _text(value))
        if rule == "password":
            return partial(validate_password, _text(value), self.password_policy)
        if rule == "phone":
            return partial(validate_phone_number, _text(value))
        raise KeyError(rule)

    def form(self, fields: Mapping[str, Any]) -> ServiceResult:
        """Validate every field of a form, first failing rule per field.

        *fields* maps a field name to ``{"value": ..., "rules": [...],
        "label": ...}``. ``label`` defaults to the field name and is used in
        the required message.
        """
        op = "check_form"
        errors: dict[str, str] = {}
        for name, spec in fields.items():
            if not isinstance(spec, Mapping):
                return self._fail(op, ErrorCode.INVALID_FORM, f"Field {name!r} must be a mapping")
            label = str(spec.get("label") or name)
            value = spec.get("value")
            rules = spec.get("rules", [])
            if not isinstance(rules, list) or not all(isinstance(rule, str) for rule in rules):
                return self._fail(
                    op,
                    ErrorCode.INVALID_FORM,
                    f"Rules for field {name!r} must be a list of rule names",
                    field=name,
                )
            try:
                checks = [self._check_for(rule, value, label) for rule in rules]
            except KeyError as exc:
                rule = exc.args[0]
                return self._fail(
                    op,
                    ErrorCode.UNKNOWN_RULE,
                    f"Unknown rule {rule!r} for field {name!r}",
                    field=name,
                    rule=rule,
                    known=list(RULES),
                )
            message = validate(*checks)
            if message is not None:
                errors[name] = message

        logger.debug("Validated %d fields, %d failing", len(fields), len(errors))
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "valid": not errors,
                "errors": errors,
                "count": len(errors),
                "fields": len(fields),
            },
        )
