"""Click classes adding an eager ``--examples`` flag.

Examples are kept out of ``--help``. A command prints its own; a group
prints its own followed by every subcommand's, so ``formkit check
--examples`` covers each kind of check.
"""

from __future__ import annotations

from typing import Any

import click


def _show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(ctx.command.render_examples())  # type: ignore[attr-defined]
    ctx.exit(0)


def _examples_option() -> click.Option:
    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_show_examples,
        help="Show usage examples.",
    )


class FormkitCommand(click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option())

    def render_examples(self) -> str:
        return self.examples or ""


class FormkitGroup(click.Group):
    """Group whose subcommands default to :class:`FormkitCommand`."""

    command_class = FormkitCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        self.params.append(_examples_option())

    def render_examples(self) -> str:
        sections = [self.examples] if self.examples else []
        for name in sorted(self.commands):
            text = getattr(self.commands[name], "render_examples", lambda: "")()
            if text:
                sections.append(f"  # {name}\n{text}")
        return "\n\n".join(sections)
