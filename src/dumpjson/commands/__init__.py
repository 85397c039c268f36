"""Subcommand modules for dumpjson.

Provides register_commands() which uses deferred imports to keep
``dumpjson --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from dumpjson.commands.check import check
    from dumpjson.commands.parse import parse
    from dumpjson.commands.stringify import stringify

    cli.add_command(stringify)
    cli.add_command(parse)
    cli.add_command(check)
