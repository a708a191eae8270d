"""formkit entry point: global output and config flags, then subcommands."""

from __future__ import annotations

from typing import Any

import click

from formkit import __version__
from formkit.commands import register_commands
from formkit.commands._base import FormkitGroup
from formkit.commands._context import AppContext
from formkit.config.settings import FormkitSettings


@click.group(
    cls=FormkitGroup,
    invoke_without_command=True,
    examples="""\
  formkit --tz Asia/Tokyo ago 2024-03-15T14:00:00
  formkit -c ./formkit.toml today
  FORMKIT_PASSWORD__MIN_LENGTH=12 formkit check password Test1234""",
)
@click.version_option(version=__version__, prog_name="formkit")
@click.option("--json", "json_output", is_flag=True, help="Print the full result as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the label or messages.")
@click.option("-v", "--verbose", is_flag=True, help="Show meta and debug logging.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option("-c", "--config", "config_path", default=None, help="Use this formkit.toml.")
@click.option("--tz", default=None, help="IANA zone for naive times and dates (overrides [time]).")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    tz: str | None,
) -> None:
    """formkit: Japanese time-ago labels and form field checks."""
    overrides: dict[str, Any] = {}
    if tz:
        overrides["time"] = {"timezone": tz}
    ctx.obj = AppContext(
        FormkitSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
            **overrides,
        )
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
