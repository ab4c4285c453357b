"""Rich renderers for OpResult.

Values are always printed as :class:`rich.text.Text` so user text that
looks like Rich markup (``"[bold]"``) is shown literally.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from textops.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from textops.services.result import OpResult


def render_result(result: OpResult, *, verbose: bool = False) -> str:
    """Render an OpResult to a styled string via Rich."""
    console = create_console()
    if result.ok:
        _render_success(result, console)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: OpResult) -> str:
    """Bare value for ``--quiet`` mode, suitable for piping."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"
    return plain_value(result.value)


def plain_value(value: Any) -> str:
    """Render a result value without decoration.

    Lists print one element per line; booleans print lowercase.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return "\n".join(str(item) for item in value)
    return str(value)


def _line(console: Console, *parts: Text) -> None:
    console.print(*parts, sep="", soft_wrap=True)


def _render_success(result: OpResult, console: Console) -> None:
    _line(console, Text("OK", style="textops.ok"), Text(f"  {result.op}", style="textops.op"))
    value = result.value
    if value is None:
        return
    key = Text("  value: ", style="textops.key")
    if isinstance(value, bool):
        style = "textops.true" if value else "textops.false"
        _line(console, key, Text(plain_value(value), style=style))
    elif isinstance(value, list):
        _line(console, Text(f"  value: {len(value)} item(s)", style="textops.key"))
        for index, item in enumerate(value):
            _line(console, Text(f"    [{index}] ", style="textops.key"), Text(repr(item)))
    else:
        _line(console, key, Text(str(value)))


def _render_error(result: OpResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    _line(
        console,
        Text("ERROR", style="textops.error"),
        Text(f"  {result.op}", style="textops.op"),
        Text(" - "),
        Text(msg),
    )
    if verbose and err:
        _line(console, Text(f"  code: {err.code}", style="textops.key"))
        for k, v in err.detail.items():
            _line(console, Text(f"    {k}: ", style="textops.key"), Text(repr(v)))
