"""Rich Console factory and theme for formkit output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

FORMKIT_THEME = Theme(
    {
        "fk.ok": "bold green",
        "fk.error": "bold red",
        "fk.warning": "bold yellow",
        "fk.op": "bold cyan",
        "fk.key": "dim",
        "fk.label": "bold",
        "fk.valid": "green",
        "fk.invalid": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=FORMKIT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_validity(valid: bool) -> str:
    """Return the Rich style name for a validation verdict."""
    return "fk.valid" if valid else "fk.invalid"
