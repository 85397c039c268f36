"""Command: report whether JSON text parses."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from dumpjson.commands._base import DumpCommand, read_input

if TYPE_CHECKING:
    from dumpjson.commands._context import AppContext


@click.command(
    cls=DumpCommand,
    examples="""\
  dumpjson check '[1,2,3]'
  dumpjson -q check --file maybe.json""",
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
@click.pass_obj
def check(app: AppContext, text: str | None, source: IO[str] | None) -> None:
    """Check whether JSON text parses. Always exits 0."""
    app.emit(app.addon.is_parseable(read_input(text, source)))
