"""Command group: predicates and validating checks."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from textops.commands._base import TextopsGroup
from textops.domain import predicates
from textops.services import validate

if TYPE_CHECKING:
    from textops.commands._context import AppContext


@click.group(
    cls=TextopsGroup,
    examples="""\
  textops check palindrome "Was it a car or a cat I saw?"
  textops check length "hello" 3 5
  textops -q check split "a,b,c" ,
  textops --json check index banana na""",
)
def check() -> None:
    """Test or validate text."""


@check.command()
@click.argument("value")
@click.pass_obj
def empty(app: AppContext, value: str) -> None:
    """Is VALUE empty or whitespace only?"""
    app.emit_value("is_empty", predicates.is_empty(value))


@check.command()
@click.argument("value")
@click.pass_obj
def palindrome(app: AppContext, value: str) -> None:
    """Do the letters and digits of VALUE read the same both ways?"""
    app.emit_value("is_palindrome", predicates.is_palindrome(value))


@check.command("contains-any")
@click.argument("value")
@click.argument("charset")
@click.pass_obj
def contains_any(app: AppContext, value: str, charset: str) -> None:
    """Does VALUE contain any codepoint of CHARSET?"""
    app.emit_value("contains_any", predicates.contains_any(value, charset))


@check.command()
@click.argument("value")
@click.argument("min_len", metavar="MIN", type=int)
@click.argument("max_len", metavar="MAX", type=int)
@click.pass_obj
def length(app: AppContext, value: str, min_len: int, max_len: int) -> None:
    """Require VALUE to have between MIN and MAX codepoints."""
    app.emit(validate.validate_length(value, min_len, max_len))


@check.command()
@click.argument("value")
@click.argument("substring")
@click.pass_obj
def index(app: AppContext, value: str, substring: str) -> None:
    """Position of the first SUBSTRING in VALUE."""
    app.emit(validate.safe_index(value, substring))


@check.command()
@click.argument("value")
@click.argument("separator")
@click.pass_obj
def split(app: AppContext, value: str, separator: str) -> None:
    """Split VALUE on every SEPARATOR."""
    app.emit(validate.safe_split(value, separator))
