"""Custom Click base classes with --examples support, and input helpers.

DumpCommand and DumpGroup accept an ``examples`` parameter. When
``--examples`` is passed, the command prints usage examples and exits.
"""

from __future__ import annotations

from typing import IO, Any

import click


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class DumpCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class DumpGroup(click.Group):
    """Click Group subclass that supports an ``--examples`` flag."""

    command_class = DumpCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def read_input(text: str | None, source: IO[str] | None) -> str:
    """Resolve command input: inline TEXT, then --file, then stdin."""
    if text is not None and source is not None:
        raise click.UsageError("Pass either TEXT or --file, not both.")
    if text is not None:
        return text
    if source is not None:
        return source.read()
    return click.get_text_stream("stdin").read()
