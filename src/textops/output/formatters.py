"""Output mode selection for OpResult.

The CLI renders an OpResult for humans (Rich), for pipes (``--quiet``,
the bare value), or for machines (``--json``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from textops.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from textops.services.result import OpResult


@dataclass(frozen=True)
class OutputSettings:
    """Output flags, resolved once per invocation."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: OpResult, *, settings: OutputSettings | None = None) -> str:
    """Format an OpResult for display.

    ``--json`` wins over ``--quiet``; human output is the default.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
