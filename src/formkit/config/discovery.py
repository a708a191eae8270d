"""Where formkit.toml comes from.

Three layers can name the file, checked in order: the ``--config`` flag,
the ``FORMKIT_CONFIG`` env var, then a walk up from the working directory.
A flag or env var naming a missing file is an error; only the walk-up may
come back empty, in which case code defaults apply.
"""

from __future__ import annotations

import os
from enum import StrEnum
from pathlib import Path
from typing import NamedTuple

CONFIG_FILENAME = "formkit.toml"
CONFIG_ENV_VAR = "FORMKIT_CONFIG"


class ConfigSource(StrEnum):
    """Which layer supplied the config file."""

    FLAG = "flag"
    ENV = "env"
    DISCOVERED = "discovered"
    DEFAULTS = "defaults"


class ConfigLocation(NamedTuple):
    path: Path | None
    source: ConfigSource


class ConfigNotFoundError(FileNotFoundError):
    """An explicitly named config file does not exist."""

    def __init__(self, path: Path, source: ConfigSource) -> None:
        origin = "--config" if source is ConfigSource.FLAG else CONFIG_ENV_VAR
        super().__init__(f"Config file from {origin} not found: {path}")
        self.path = path
        self.source = source


def walk_up(start: Path) -> Path | None:
    """Nearest formkit.toml in *start* or any of its parents."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def locate_config(explicit: str | Path | None = None, start: Path | None = None) -> ConfigLocation:
    """Resolve the config file and the layer that named it.

    Raises:
        ConfigNotFoundError: *explicit* or ``FORMKIT_CONFIG`` names a file
            that does not exist.
    """
    named = [(explicit, ConfigSource.FLAG), (os.environ.get(CONFIG_ENV_VAR), ConfigSource.ENV)]
    for value, source in named:
        if value:
            path = Path(value)
            if not path.is_file():
                raise ConfigNotFoundError(path, source)
            return ConfigLocation(path, source)

    found = walk_up(start or Path.cwd())
    if found is None:
        return ConfigLocation(None, ConfigSource.DEFAULTS)
    return ConfigLocation(found, ConfigSource.DISCOVERED)
