"""Click base classes with --examples support.

``TextopsCommand`` and ``TextopsGroup`` accept an ``examples`` string.
Passing ``--examples`` prints it and exits, keeping ``--help`` short.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class TextopsCommand(click.Command):
    """Command that supports ``--examples``.

    Integer arguments may be negative, so unknown ``-N`` tokens are passed
    through as arguments instead of being rejected as options.
    """

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        context_settings = kwargs.pop("context_settings", None) or {}
        context_settings.setdefault("ignore_unknown_options", True)
        super().__init__(*args, context_settings=context_settings, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class TextopsGroup(click.Group):
    """Group whose subcommands are ``TextopsCommand`` by default."""

    command_class = TextopsCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)
