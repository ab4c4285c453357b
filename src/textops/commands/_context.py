"""AppContext: shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Owns logging setup and result emission (stdout/stderr
routing plus exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from textops.config.logging import configure_logging
from textops.output.formatters import OutputSettings, format_result
from textops.services.result import OpResult

if TYPE_CHECKING:
    from textops.config.settings import TextopsSettings


class AppContext:
    """Per-invocation state shared by every subcommand."""

    def __init__(self, settings: TextopsSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: OpResult) -> None:
        """Format and output an OpResult with correct exit semantics.

        * Success: writes to stdout and returns normally. Warnings go to
          stderr so they don't pollute piped output.
        * Failure: writes to stderr and exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def emit_value(self, op: str, value: Any) -> None:
        """Emit the outcome of a permissive operation, which cannot fail."""
        self.emit(OpResult.success(op, value))
