"""Command: today's date and week summary."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from formkit.commands._base import FormkitCommand

if TYPE_CHECKING:
    from formkit.commands._context import AppContext


@click.command(
    cls=FormkitCommand,
    examples="""\
  formkit today
  formkit today --reference 2024-03-15T14:30:00
  formkit --json today""",
)
@click.option(
    "--reference",
    "-r",
    default=None,
    help="ISO-8601 instant to summarize (default: current time).",
)
@click.pass_obj
def today(app: AppContext, reference: str | None) -> None:
    """Show the date, time, and week range for today."""
    from formkit.services.time import TimeService

    app.emit(TimeService(app.settings).date_info(reference))
