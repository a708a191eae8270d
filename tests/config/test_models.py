"""Tests for configuration section models."""

import pytest
from pydantic import ValidationError

from formkit.config.models import CalendarConfig, FormkitConfig, TimeConfig
from formkit.domain.validation import PasswordPolicy


class TestTimeConfig:
    def test_default_is_local(self) -> None:
        assert TimeConfig().timezone == ""

    def test_known_zone(self) -> None:
        assert TimeConfig(timezone="Asia/Tokyo").timezone == "Asia/Tokyo"

    def test_unknown_zone(self) -> None:
        with pytest.raises(ValidationError, match="Unknown timezone"):
            TimeConfig(timezone="Mars/Olympus_Mons")


class TestCalendarConfig:
    def test_defaults(self) -> None:
        cfg = CalendarConfig()
        assert cfg.week_starts_on == 0
        assert cfg.recent_days == 7

    def test_week_start_bounds(self) -> None:
        with pytest.raises(ValidationError):
            CalendarConfig(week_starts_on=7)


class TestFormkitConfig:
    def test_sections_default(self) -> None:
        cfg = FormkitConfig()
        assert cfg.password == PasswordPolicy()
        assert cfg.time == TimeConfig()
        assert cfg.calendar == CalendarConfig()

    def test_frozen(self) -> None:
        cfg = FormkitConfig()
        with pytest.raises(ValidationError):
            cfg.time = TimeConfig(timezone="UTC")  # type: ignore[misc]

    def test_model_validate_sparse(self) -> None:
        cfg = FormkitConfig.model_validate({"password": {"min_length": 10}})
        assert cfg.password.min_length == 10
        assert cfg.password.require_mixed_case is True

    def test_password_section_uses_policy_rules(self) -> None:
        with pytest.raises(ValidationError):
            FormkitConfig.model_validate({"password": {"min_length": 20, "max_length": 10}})
