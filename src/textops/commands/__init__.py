"""Subcommand groups for textops.

register_commands() uses deferred imports so ``textops --help`` stays
fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``text``, ``check``, and ``num`` groups on the root CLI."""
    from textops.commands.check import check
    from textops.commands.num import num
    from textops.commands.text import text

    cli.add_command(text)
    cli.add_command(check)
    cli.add_command(num)
