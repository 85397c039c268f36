"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides the lazily built JsonAddon and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dumpjson.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from dumpjson.config.settings import DumpJsonSettings
    from dumpjson.services.addon import JsonAddon
    from dumpjson.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: DumpJsonSettings) -> None:
        self.settings = settings
        self._addon: JsonAddon | None = None

        from dumpjson.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            trace_tree=settings.deserializer.trace_tree,
        )

    @property
    def addon(self) -> JsonAddon:
        """The JsonAddon service (created lazily on first access)."""
        if self._addon is None:
            from dumpjson.services.addon import JsonAddon

            self._addon = JsonAddon(self.settings)
        return self._addon

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output and not settings.quiet:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
