"""Subcommand modules for formkit.

Provides register_commands() which uses deferred imports to keep
``formkit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``check`` group and the standalone commands on *cli*."""
    from formkit.commands.ago import ago
    from formkit.commands.check import check
    from formkit.commands.today import today

    cli.add_command(check)
    cli.add_command(ago)
    cli.add_command(today)
