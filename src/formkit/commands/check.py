"""Command group: validate single field values or whole forms."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from formkit.commands._base import FormkitGroup
from formkit.domain.validation import DEFAULT_FIELD_NAME
from formkit.services.validation import ValidationService

if TYPE_CHECKING:
    from formkit.commands._context import AppContext


@click.group(cls=FormkitGroup)
@click.pass_obj
def check(app: AppContext) -> None:
    """Validate form field values."""


@check.command(
    examples="""\
  formkit check required 太郎 --field 名前
  formkit check required "   " --field 名前"""
)
@click.argument("value")
@click.option("--field", "field_name", default=DEFAULT_FIELD_NAME, help="Field name for messages.")
@click.pass_obj
def required(app: AppContext, value: str, field_name: str) -> None:
    """Check that VALUE is not blank."""
    app.emit(ValidationService(app.settings).required(value, field_name))


@check.command(
    examples="""\
  formkit check email user@example.com
  formkit -q check email userexample.com"""
)
@click.argument("value")
@click.pass_obj
def email(app: AppContext, value: str) -> None:
    """Check that VALUE looks like an email address."""
    app.emit(ValidationService(app.settings).email(value))


@check.command(
    examples="""\
  formkit check password Test1234
  formkit check password test1234 --no-mixed-case
  formkit check password Test1 --min-length 5"""
)
@click.argument("value")
@click.option("--min-length", type=int, default=None, help="Override the minimum length.")
@click.option("--max-length", type=int, default=None, help="Override the maximum length.")
@click.option("--no-mixed-case", is_flag=True, help="Do not require both letter cases.")
@click.option("--no-number", is_flag=True, help="Do not require a digit.")
@click.pass_obj
def password(
    app: AppContext,
    value: str,
    min_length: int | None,
    max_length: int | None,
    no_mixed_case: bool,
    no_number: bool,
) -> None:
    """Check VALUE against the configured password policy."""
    overrides: dict[str, Any] = {}
    if min_length is not None:
        overrides["min_length"] = min_length
    if max_length is not None:
        overrides["max_length"] = max_length
    if no_mixed_case:
        overrides["require_mixed_case"] = False
    if no_number:
        overrides["require_number"] = False
    app.emit(ValidationService(app.settings).password(value, **overrides))


@check.command(
    examples="""\
  formkit check phone 090-1234-5678
  formkit check phone '03(1234)5678'"""
)
@click.argument("value")
@click.pass_obj
def phone(app: AppContext, value: str) -> None:
    """Check that VALUE is a Japanese domestic phone number."""
    app.emit(ValidationService(app.settings).phone(value))


@check.command(
    examples="""\
  formkit check form signup.json

signup.json:
  {"email": {"value": "user@example.com", "rules": ["required", "email"]},
   "name": {"value": "", "rules": ["required"], "label": "名前"}}"""
)
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_obj
def form(app: AppContext, path: Path) -> None:
    """Validate every field described in the JSON file PATH."""
    try:
        fields = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON in {path}: {exc}"
        raise click.ClickException(msg) from exc
    if not isinstance(fields, dict):
        msg = f"{path} must contain a JSON object of fields"
        raise click.ClickException(msg)
    app.emit(ValidationService(app.settings).form(fields))
