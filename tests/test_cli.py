"""Tests for the root formkit CLI."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from formkit import __version__
from formkit.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "formkit" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_project")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flags_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/tmp/missing-formkit.toml", "--version"])
    assert result.exit_code == 0


@pytest.mark.parametrize("name", ["ago", "today", "check"])
def test_commands_registered(name: str) -> None:
    assert name in cli.commands


@pytest.mark.parametrize("name", ["required", "email", "password", "phone", "form"])
def test_check_subcommands_registered(name: str) -> None:
    assert name in cli.commands["check"].commands  # type: ignore[attr-defined]


def test_missing_config_file_is_an_error(cli_runner: CliRunner, tmp_path: Path) -> None:
    result = cli_runner.invoke(cli, ["-c", str(tmp_path / "nope.toml"), "today"])
    assert result.exit_code == 1
    assert "not found" in result.output


@pytest.mark.usefixtures("_isolated_project")
def test_tz_flag_overrides_config(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(
        cli, ["--json", "--tz", "UTC", "ago", "2024-03-15T14:00:00", "-r", "2024-03-15T14:30:00"]
    )
    assert result.exit_code == 0
    data = json.loads(result.output)["data"]
    assert data["timezone"] == "UTC"
    assert data["label"] == "30分前"


@pytest.mark.usefixtures("_isolated_project")
def test_unknown_tz_is_a_usage_error(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--tz", "Mars/Base", "today"])
    assert result.exit_code == 1
    assert "Unknown timezone" in result.output


@pytest.mark.usefixtures("_isolated_project")
def test_bad_env_setting_is_reported(cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORMKIT_CALENDAR__WEEK_STARTS_ON", "9")
    result = cli_runner.invoke(cli, ["today"])
    assert result.exit_code == 1
    assert "Invalid settings" in result.output


def test_root_examples_include_subcommands(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--examples"])
    assert result.exit_code == 0
    assert "formkit --tz Asia/Tokyo" in result.output
    assert "# ago" in result.output
    assert "formkit check email user@example.com" in result.output
