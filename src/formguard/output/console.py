"""Rich console used by the formatters.

Output is captured in memory so ``format_result`` can return a string and the
CLI decides where it goes. Rich drops colour on its own when the target is not
a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 120

FORMGUARD_THEME = Theme(
    {
        "fg.ok": "bold green",
        "fg.invalid": "bold yellow",
        "fg.error": "bold red",
        "fg.op": "bold cyan",
        "fg.key": "dim",
        "fg.property": "bold blue",
        "fg.message_id": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Console writing to an in-memory buffer with the formguard theme."""
    return Console(
        file=StringIO(),
        theme=FORMGUARD_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    """Text rendered so far by a console from :func:`create_console`."""
    buffer = console.file
    if not isinstance(buffer, StringIO):
        msg = "console does not render to an in-memory buffer"
        raise TypeError(msg)
    return buffer.getvalue()
