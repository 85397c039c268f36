"""Root CLI group for dumpjson with global flags and command registration."""

from __future__ import annotations

import click

from dumpjson import __version__
from dumpjson.commands import register_commands
from dumpjson.commands._base import DumpGroup
from dumpjson.commands._context import AppContext
from dumpjson.config.settings import DumpJsonSettings


@click.group(
    "dumpjson",
    cls=DumpGroup,
    invoke_without_command=True,
    examples="""\
  dumpjson stringify --file ship.dump.json
  dumpjson parse '{"name":"Rocket","altitude":1000}'
  dumpjson check '[1,2'""",
)
@click.version_option(version=__version__, prog_name="dumpjson")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Bare values only.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Convert host tagged dumps to JSON text and back."""
    ctx.ensure_object(dict)
    settings = DumpJsonSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
