"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, formkit.toml only contains overrides.
An absent file behaves exactly like an empty one.
"""

from __future__ import annotations

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

from formkit.domain.validation import PasswordPolicy

# --- formkit.toml sections ---
# [password] is the domain PasswordPolicy itself.


class TimeConfig(BaseModel):
    """[time] section.

    An empty ``timezone`` means the system local zone.
    """

    model_config = {"frozen": True}

    timezone: str = ""

    @field_validator("timezone")
    @classmethod
    def _known_zone(cls, value: str) -> str:
        if value:
            try:
                ZoneInfo(value)
            except (ZoneInfoNotFoundError, ValueError) as exc:
                msg = f"Unknown timezone: {value}"
                raise ValueError(msg) from exc
        return value


class CalendarConfig(BaseModel):
    """[calendar] section."""

    model_config = {"frozen": True}

    week_starts_on: int = Field(default=0, ge=0, le=6)
    recent_days: int = Field(default=7, ge=0)


class FormkitConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    password: PasswordPolicy = Field(default_factory=PasswordPolicy)
    time: TimeConfig = Field(default_factory=TimeConfig)
    calendar: CalendarConfig = Field(default_factory=CalendarConfig)
