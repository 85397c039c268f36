"""Output helpers for ServiceResult.

Three modes:
- JSON (``--json``): the full ServiceResult as indented JSON
- quiet (``-q``): the bare payload (JSON text, parsed value, true/false)
- human (default): a Rich-rendered status line plus fields

``stringify`` always prints the produced JSON text on its own so the
output can be piped.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from rich.text import Text

from dumpjson.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from dumpjson.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags taken from the CLI."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _compact(value: Any) -> str:
    return _json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=repr)


def _payload(result: ServiceResult) -> str:
    """The bare output value of a successful result."""
    data = result.data
    if "json" in data:
        return str(data["json"])
    if "parseable" in data:
        return "true" if data["parseable"] else "false"
    return _compact(data.get("value"))


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if not result.ok:
        return render_error(result, verbose=settings.verbose)
    if settings.quiet or result.op == "stringify":
        return _payload(result)
    return render_result(result)


def render_result(result: ServiceResult) -> str:
    """Render a successful result with one field per data key."""
    console = create_console()
    console.print(Text("OK", style="dj.ok"), Text(f"  {result.op}", style="dj.op"))
    for key, value in result.data.items():
        _field(console, key, value)
    return get_output(console).rstrip("\n")


def render_error(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a failed result; detail fields only when verbose."""
    console = create_console()
    error = result.error
    message = error.message if error else "Unknown error"
    console.print(
        Text("ERROR", style="dj.error"),
        Text(f"  {result.op}", style="dj.op"),
        Text(f" — {message}"),
    )
    if error and verbose:
        _field(console, "code", error.code, style="dj.code")
        for key, value in error.detail.items():
            _field(console, key, value)
    return get_output(console).rstrip("\n")


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field."""
    if key == "type":
        style = "dj.type"
    text = value if isinstance(value, str) and key != "value" else _compact(value)
    console.print(Text(f"  {key}: ", style="dj.key"), Text(text, style=style), sep="")
