"""Command: tagged dump document to plain JSON."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from dumpjson.commands._base import DumpCommand, read_input

if TYPE_CHECKING:
    from dumpjson.commands._context import AppContext


@click.command(
    cls=DumpCommand,
    examples="""\
  dumpjson stringify --file ship.dump.json
  cat ship.dump.json | dumpjson stringify
  dumpjson stringify '{"$type":"StringValue","value":"Rocket"}'
  dumpjson --json stringify --file pid.dump.json""",
)
@click.argument("text", required=False)
@click.option(
    "-f",
    "--file",
    "source",
    type=click.File("r", encoding="utf-8"),
    default=None,
    help="Read the dump document from a file ('-' for stdin).",
)
@click.pass_obj
def stringify(app: AppContext, text: str | None, source: IO[str] | None) -> None:
    """Convert a host's tagged dump document into plain JSON."""
    app.emit(app.addon.stringify_document(read_input(text, source)))
