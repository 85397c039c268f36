"""Command: JSON text to host value."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from dumpjson.commands._base import DumpCommand, read_input

if TYPE_CHECKING:
    from dumpjson.commands._context import AppContext


@click.command(
    cls=DumpCommand,
    examples="""\
  dumpjson parse '{"name":"Rocket","altitude":1000}'
  dumpjson parse --file telemetry.json
  dumpjson parse '{broken' --default none
  dumpjson -q parse 2147483648""",
)
@click.argument("text", required=False)
@click.option(
    "-f",
    "--file",
    "source",
    type=click.File("r", encoding="utf-8"),
    default=None,
    help="Read JSON text from a file ('-' for stdin).",
)
@click.option(
    "--default",
    "fallback",
    default=None,
    help="Return this string instead of failing when the input does not parse.",
)
@click.pass_obj
def parse(app: AppContext, text: str | None, source: IO[str] | None, fallback: str | None) -> None:
    """Parse JSON text into a host value and show its host type."""
    json_text = read_input(text, source)
    if fallback is not None:
        app.emit(app.addon.parse_or_else(json_text, fallback))
    else:
        app.emit(app.addon.parse(json_text))
