"""Shared pytest fixtures for formkit tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from formkit.config.settings import FormkitSettings


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's FORMKIT_* environment out of every test."""
    monkeypatch.delenv("FORMKIT_CONFIG", raising=False)
    monkeypatch.delenv("FORMKIT_TIME__TIMEZONE", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Empty directory with no formkit.toml above it in the test tree."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def settings(project_root: Path) -> FormkitSettings:
    """Default settings pinned to Asia/Tokyo so calendar output is stable."""
    toml = project_root / "formkit.toml"
    toml.write_text('[time]\ntimezone = "Asia/Tokyo"\n', encoding="utf-8")
    return FormkitSettings.from_cli(start=project_root)


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from a temp directory configured for Asia/Tokyo.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    (project_root / "formkit.toml").write_text(
        '[time]\ntimezone = "Asia/Tokyo"\n', encoding="utf-8"
    )
    monkeypatch.chdir(project_root)
