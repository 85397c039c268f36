"""Rich console used to render parse and stringify results for people.

The theme styles the OK/ERROR banner, operation names, host type names
such as ``Lexicon`` or ``ScalarIntValue``, and error codes. Output is
buffered so formatters hand plain strings back to the CLI.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DUMPJSON_THEME = Theme(
    {
        "dj.ok": "bold green",
        "dj.error": "bold red",
        "dj.warning": "bold yellow",
        "dj.op": "bold cyan",
        "dj.key": "dim",
        "dj.type": "bold blue",
        "dj.code": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a buffered console styled with DUMPJSON_THEME.

    Soft wrapping keeps long JSON values on one line. *width* defaults
    to 120 columns.
    """
    return Console(
        file=StringIO(),
        theme=DUMPJSON_THEME,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Return everything rendered to *console* so far."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
