"""Command group: bounded-integer helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from textops.commands._base import TextopsGroup
from textops.domain import numeric
from textops.services.validate import safe_clamp

if TYPE_CHECKING:
    from textops.commands._context import AppContext


@click.group(
    cls=TextopsGroup,
    examples="""\
  textops num clamp 42 0 10
  textops num clamp --strict 5 10 0
  textops num abs --saturate -9223372036854775808
  textops num max 3 7""",
)
def num() -> None:
    """Clamp and compare integers."""


@num.command()
@click.argument("value", type=int)
@click.argument("low", type=int)
@click.argument("high", type=int)
@click.option("--strict", is_flag=True, help="Fail when LOW > HIGH instead of saturating.")
@click.pass_obj
def clamp(app: AppContext, value: int, low: int, high: int, strict: bool) -> None:
    """Restrict VALUE to [LOW, HIGH]."""
    if strict:
        app.emit(safe_clamp(value, low, high))
    else:
        app.emit_value("clamp", numeric.clamp(value, low, high))


@num.command("abs")
@click.argument("value", type=int)
@click.option("--saturate", is_flag=True, help="Cap at the largest signed BITS-wide value.")
@click.option("--bits", type=click.IntRange(min=2), default=64, show_default=True)
@click.pass_obj
def abs_(app: AppContext, value: int, saturate: bool, bits: int) -> None:
    """Magnitude of VALUE."""
    if saturate:
        app.emit_value("saturating_abs", numeric.saturating_abs(value, bits=bits))
    else:
        app.emit_value("abs_int", numeric.abs_int(value))


@num.command("max")
@click.argument("a", type=int)
@click.argument("b", type=int)
@click.pass_obj
def max_(app: AppContext, a: int, b: int) -> None:
    """Larger of A and B."""
    app.emit_value("max_of", numeric.max_of(a, b))


@num.command("min")
@click.argument("a", type=int)
@click.argument("b", type=int)
@click.pass_obj
def min_(app: AppContext, a: int, b: int) -> None:
    """Smaller of A and B."""
    app.emit_value("min_of", numeric.min_of(a, b))
