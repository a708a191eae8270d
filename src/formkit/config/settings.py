"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``FORMKIT_*`` prefix
  3. TOML file    — ``formkit.toml`` from --config, FORMKIT_CONFIG, or walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from formkit.config.discovery import ConfigNotFoundError, ConfigSource, locate_config
from formkit.config.models import CalendarConfig, FormkitConfig, TimeConfig
from formkit.domain.validation import PasswordPolicy


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read the TOML layer, checking its sections before they are merged.

    Section errors are reported against the file so a bad value in
    formkit.toml is not mistaken for a bad env var or flag.
    """

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc
            try:
                FormkitConfig.model_validate(self._data)
            except ValidationError as exc:
                msg = f"Invalid config in {toml_path}:\n{exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# TOML path handed to settings_customise_sources during construction.
_tls = threading.local()


class FormkitSettings(BaseSettings):
    """Unified settings for the formkit CLI and services.

    Attributes:
        config_path: The TOML file that was loaded, or None when running
            on defaults.
        config_source: Which layer named *config_path*.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FORMKIT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    config_source: ConfigSource = ConfigSource.DEFAULTS

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    password: PasswordPolicy = Field(default_factory=PasswordPolicy)
    time: TimeConfig = Field(default_factory=TimeConfig)
    calendar: CalendarConfig = Field(default_factory=CalendarConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> FormkitSettings:
        """Construct settings from a CLI invocation.

        *config_path* (the --config flag) wins over ``FORMKIT_CONFIG``,
        which wins over walking up from *start* (default: cwd). CLI flags
        are merged as highest-priority overrides.

        Raises:
            click.ClickException: the flag or env var names a missing file,
                or the merged settings are invalid.
        """
        try:
            location = locate_config(config_path, start)
        except ConfigNotFoundError as exc:
            raise click.ClickException(str(exc)) from exc

        _tls.toml_path = location.path
        try:
            return cls(config_path=location.path, config_source=location.source, **cli_flags)
        except ValidationError as exc:
            msg = f"Invalid settings:\n{exc}"
            raise click.ClickException(msg) from exc
        finally:
            _tls.toml_path = None

    @property
    def timezone(self) -> str | None:
        """Configured IANA zone name, or None for the system local zone."""
        return self.time.timezone or None
