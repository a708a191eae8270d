"""Command: relative "time ago" label for a timestamp."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from formkit.commands._base import FormkitCommand

if TYPE_CHECKING:
    from formkit.commands._context import AppContext


@click.command(
    cls=FormkitCommand,
    examples="""\
  formkit ago 2024-03-15T14:00:00
  formkit ago 2024-03-08T10:00:00 --reference 2024-03-15T14:30:00
  formkit ago 2024-03-15T05:00:00+00:00
  formkit --json ago 2023-12-25""",
)
@click.argument("target")
@click.option(
    "--reference",
    "-r",
    default=None,
    help="ISO-8601 instant treated as now (default: current time).",
)
@click.pass_obj
def ago(app: AppContext, target: str, reference: str | None) -> None:
    """Show how long ago TARGET (ISO-8601) was."""
    from formkit.services.time import TimeService

    app.emit(TimeService(app.settings).ago(target, reference))
