"""Tests for the check CLI command group."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from formkit.cli import cli


@pytest.mark.usefixtures("_isolated_project")
class TestSingleFieldCommands:
    def test_required_blank(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "check", "required", "   ", "--field", "名前"])
        assert result.exit_code == 0
        assert result.output.strip() == "名前は必須です"

    def test_required_default_field_name(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "check", "required", ""])
        assert result.output.strip() == "項目は必須です"

    def test_email_valid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", "email", "user@example.com"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["op"] == "check_email"
        assert data["data"] == {"valid": True, "message": None}

    def test_email_invalid_is_not_a_failure(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "email", "userexample.com"])
        assert result.exit_code == 0
        assert "valid: false" in result.output
        assert "メールアドレスの形式が正しくありません" in result.output

    def test_password_defaults(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "check", "password", "TestTest"])
        assert result.output.strip() == "パスワードは数字を含めてください"

    def test_password_overrides(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "check", "password", "test", "--min-length", "4", "--no-mixed-case", "--no-number"]
        )
        assert json.loads(result.output)["data"]["valid"] is True

    def test_password_bad_policy(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "password", "Test1234", "--max-length", "2"])
        assert result.exit_code == 1
        assert "Invalid password policy" in result.output

    def test_password_policy_from_config(
        self, cli_runner: CliRunner, project_root: Path
    ) -> None:
        (project_root / "formkit.toml").write_text("[password]\nrequire_number = false\n")
        result = cli_runner.invoke(cli, ["--json", "check", "password", "TestTest"])
        assert json.loads(result.output)["data"]["valid"] is True

    def test_phone(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "check", "phone", "090123456"])
        assert result.output.strip() == "電話番号は10桁または11桁で入力してください"


@pytest.mark.usefixtures("_isolated_project")
class TestFormCommand:
    def test_form(self, cli_runner: CliRunner, project_root: Path) -> None:
        form = project_root / "signup.json"
        form.write_text(
            json.dumps(
                {
                    "email": {"value": "invalid", "rules": ["required", "email"]},
                    "name": {"value": "", "rules": ["required"], "label": "名前"},
                    "phone": {"value": "03-1234-5678", "rules": ["phone"]},
                },
                ensure_ascii=False,
            ),
            encoding="utf-8",
        )
        result = cli_runner.invoke(cli, ["--json", "check", "form", str(form)])
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["valid"] is False
        assert data["errors"] == {
            "email": "メールアドレスの形式が正しくありません",
            "name": "名前は必須です",
        }

    def test_quiet_failing_form_prints_messages(self, cli_runner: CliRunner, project_root: Path) -> None:
        form = project_root / "f.json"
        form.write_text(
            json.dumps({"name": {"value": "", "rules": ["required"], "label": "名前"}}, ensure_ascii=False),
            encoding="utf-8",
        )
        result = cli_runner.invoke(cli, ["-q", "check", "form", str(form)])
        assert result.exit_code == 0
        assert result.output.strip() == "名前は必須です"

    def test_rules_not_a_list(self, cli_runner: CliRunner, project_root: Path) -> None:
        form = project_root / "form.json"
        form.write_text('{"email": {"value": "a@b.c", "rules": null}}')
        result = cli_runner.invoke(cli, ["check", "form", str(form)])
        assert result.exit_code == 1
        assert "must be a list of rule names" in result.output

    def test_unknown_rule(self, cli_runner: CliRunner, project_root: Path) -> None:
        form = project_root / "form.json"
        form.write_text('{"zip": {"value": "1000001", "rules": ["postcode"]}}')
        result = cli_runner.invoke(cli, ["check", "form", str(form)])
        assert result.exit_code == 1
        assert "Unknown rule" in result.output

    def test_invalid_json(self, cli_runner: CliRunner, project_root: Path) -> None:
        form = project_root / "form.json"
        form.write_text("{not json")
        result = cli_runner.invoke(cli, ["check", "form", str(form)])
        assert result.exit_code != 0
        assert "Invalid JSON" in result.output

    def test_top_level_must_be_object(self, cli_runner: CliRunner, project_root: Path) -> None:
        form = project_root / "form.json"
        form.write_text("[]")
        result = cli_runner.invoke(cli, ["check", "form", str(form)])
        assert result.exit_code != 0
        assert "JSON object" in result.output

    def test_missing_file(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "form", "nope.json"])
        assert result.exit_code == 2
