"""Command group: codepoint-sequence transforms."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from textops.commands._base import TextopsGroup
from textops.domain import transforms
from textops.services.result import ErrorKind, OpResult
from textops.services.validate import safe_truncate

if TYPE_CHECKING:
    from textops.commands._context import AppContext


@click.group(
    cls=TextopsGroup,
    examples="""\
  textops text reverse "héllo"
  textops text title "the quick  brown fox"
  textops text truncate --strict "naïve café" 5
  textops text slugify --max-length 20 "Hello, World!"
  textops -q text repeat ab 3""",
)
def text() -> None:
    """Transform text codepoint by codepoint."""


@text.command()
@click.argument("value")
@click.pass_obj
def reverse(app: AppContext, value: str) -> None:
    """Reverse the codepoints of VALUE."""
    app.emit_value("reverse", transforms.reverse(value))


@text.command()
@click.argument("value")
@click.pass_obj
def capitalize(app: AppContext, value: str) -> None:
    """Upper-case the first codepoint of VALUE."""
    app.emit_value("capitalize", transforms.capitalize(value))


@text.command()
@click.argument("value")
@click.pass_obj
def title(app: AppContext, value: str) -> None:
    """Title-case VALUE, word starts following whitespace."""
    app.emit_value("to_title_case", transforms.to_title_case(value))


@text.command()
@click.argument("value")
@click.argument("count", type=int)
@click.option("--strict", is_flag=True, help="Fail on a negative COUNT instead of ignoring it.")
@click.pass_obj
def truncate(app: AppContext, value: str, count: int, strict: bool) -> None:
    """Keep the first COUNT codepoints of VALUE."""
    if strict:
        app.emit(safe_truncate(value, count))
    else:
        app.emit_value("truncate", transforms.truncate(value, count))


@text.command()
@click.argument("value")
@click.argument("i", type=int)
@click.argument("j", type=int)
@click.pass_obj
def swap(app: AppContext, value: str, i: int, j: int) -> None:
    """Exchange the codepoints at positions I and J (out of range: no-op)."""
    app.emit_value("swap", transforms.swap(value, i, j))


@text.command("trim-all")
@click.argument("value")
@click.pass_obj
def trim_all(app: AppContext, value: str) -> None:
    """Remove every whitespace codepoint from VALUE."""
    app.emit_value("trim_all", transforms.trim_all(value))


@text.command("normalize-spaces")
@click.argument("value")
@click.pass_obj
def normalize_spaces(app: AppContext, value: str) -> None:
    """Collapse whitespace runs in VALUE to single spaces."""
    app.emit_value("normalize_spaces", transforms.normalize_spaces(value))


@text.command()
@click.argument("value")
@click.option(
    "--max-length",
    type=int,
    default=None,
    help="Cut the slug to this many codepoints (default: [slugify] max_length).",
)
@click.pass_obj
def slugify(app: AppContext, value: str, max_length: int | None) -> None:
    """Render VALUE as a lowercase, hyphen-delimited slug."""
    if max_length is None:
        max_length = app.settings.slugify.max_length
    app.emit_value("slugify", transforms.slugify(value, max_length=max_length))


@text.command()
@click.argument("value")
@click.argument("count", type=int)
@click.option("--fast", is_flag=True, help="Use the single-join implementation.")
@click.pass_obj
def repeat(app: AppContext, value: str, count: int, fast: bool) -> None:
    """Concatenate COUNT copies of VALUE."""
    op = "fast_repeat" if fast else "repeat"
    limit = app.settings.repeat.max_count
    if count > limit:
        app.emit(
            OpResult.failure(
                op,
                ErrorKind.INVALID_ARGUMENT,
                f"count {count} exceeds [repeat] max_count {limit}",
                count=count,
                max_count=limit,
            )
        )
        return
    impl = transforms.fast_repeat if fast else transforms.repeat
    app.emit_value(op, impl(value, count))
