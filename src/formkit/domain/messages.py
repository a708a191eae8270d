"""Validation error kinds and their user-facing message tables.

Validators select messages through :func:`message_for` so the wording
lives in one place. Only the Japanese table is shipped; its strings are
the observable contract of every validator.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorKind(StrEnum):
    """Every way a field validator can fail."""

    REQUIRED = "required"
    EMAIL_FORMAT = "email_format"
    EMAIL_TOO_LONG = "email_too_long"
    PASSWORD_TOO_SHORT = "password_too_short"
    PASSWORD_TOO_LONG = "password_too_long"
    PASSWORD_MIXED_CASE = "password_mixed_case"
    PASSWORD_NUMBER = "password_number"
    PHONE_NOT_NUMERIC = "phone_not_numeric"
    PHONE_LENGTH = "phone_length"
    PHONE_LEADING_ZERO = "phone_leading_zero"


DEFAULT_LOCALE = "ja"

MESSAGES_JA: dict[ErrorKind, str] = {
    ErrorKind.REQUIRED: "{field_name}は必須です",
    ErrorKind.EMAIL_FORMAT: "メールアドレスの形式が正しくありません",
    ErrorKind.EMAIL_TOO_LONG: "メールアドレスが長すぎます",
    ErrorKind.PASSWORD_TOO_SHORT: "パスワードは{min_length}文字以上で入力してください",
    ErrorKind.PASSWORD_TOO_LONG: "パスワードは{max_length}文字以内で入力してください",
    ErrorKind.PASSWORD_MIXED_CASE: "パスワードは大文字と小文字を両方含めてください",
    ErrorKind.PASSWORD_NUMBER: "パスワードは数字を含めてください",
    ErrorKind.PHONE_NOT_NUMERIC: "電話番号は数字で入力してください",
    ErrorKind.PHONE_LENGTH: "電話番号は10桁または11桁で入力してください",
    ErrorKind.PHONE_LEADING_ZERO: "電話番号は0から始まる番号を入力してください",
}

MESSAGE_TABLES: dict[str, dict[ErrorKind, str]] = {
    "ja": MESSAGES_JA,
}


def message_for(kind: ErrorKind, *, locale: str = DEFAULT_LOCALE, **params: Any) -> str:
    """Render the message for *kind* in *locale*.

    Raises:
        KeyError: If *locale* has no message table.

    Examples:
        >>> message_for(ErrorKind.REQUIRED, field_name="名前")
        '名前は必須です'
    """
    return MESSAGE_TABLES[locale][kind].format(**params)
