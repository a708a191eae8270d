"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich styled key/value output) or
machines (--json). ``--quiet`` reduces success to the headline value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from rich.text import Text

from formkit.output.console import create_console, get_output, style_for_validity

if TYPE_CHECKING:
    from rich.console import Console

    from formkit.services.result import ServiceResult

# Data keys printed on their own in --quiet mode, first match wins.
_QUIET_KEYS = ("label", "message", "today")


class OutputSettings(BaseModel):
    """How a result should be rendered."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _field(console: Console, key: str, value: Any, indent: int = 2) -> None:
    """Print a single indented key-value field."""
    line = Text(f"{' ' * indent}{key}: ", style="fk.key")
    if key == "valid" and isinstance(value, bool):
        line.append(str(value).lower(), style=style_for_validity(value))
    elif key == "label":
        line.append(str(value), style="fk.label")
    elif value is None:
        line.append("-", style="fk.key")
    else:
        line.append(str(value))
    console.print(line)


def _render_ok(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    console.print(Text.assemble(("OK", "fk.ok"), (f"  {result.op}", "fk.op")))
    for key, value in result.data.items():
        if isinstance(value, dict):
            console.print(Text(f"  {key}:", style="fk.key"))
            for sub_key, sub_value in value.items():
                _field(console, sub_key, sub_value, indent=4)
        else:
            _field(console, key, value)
    if verbose and result.meta:
        console.print(Text("  meta:", style="fk.key"))
        for key, value in result.meta.items():
            _field(console, key, value, indent=4)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    message = result.error.message if result.error else "Unknown error"
    console.print(Text.assemble(("ERROR", "fk.error"), (f"  {result.op}", "fk.op"), f" — {message}"))
    if verbose and result.error and result.error.detail:
        for key, value in result.error.detail.items():
            _field(console, key, value)


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    failures = result.failures()
    if failures:
        return "\n".join(failures)
    for key in _QUIET_KEYS:
        value = result.data.get(key)
        if value:
            return str(value)
    return f"OK: {result.op}"


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode. When omitted, built from *json_output*.
        json_output: Shorthand for ``OutputSettings(json_output=True)``.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)

    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)

    console = create_console()
    if result.ok:
        _render_ok(result, console, verbose=settings.verbose)
    else:
        _render_error(result, console, verbose=settings.verbose)
    return get_output(console).rstrip("\n")
