"""Rich Console factory and theme for thaiid output.

Consoles render to a StringIO buffer so renderers keep a
``str``-returning contract. In non-TTY environments (tests, pipes)
Rich drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

THAIID_THEME = Theme(
    {
        "thaiid.ok": "bold green",
        "thaiid.error": "bold red",
        "thaiid.warning": "bold yellow",
        "thaiid.op": "bold cyan",
        "thaiid.key": "dim",
        "thaiid.id": "bold blue",
        "thaiid.digit": "magenta",
        "thaiid.status.valid": "green",
        "thaiid.status.malformed": "red",
        "thaiid.status.checksum_mismatch": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=THAIID_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_status(status: str) -> str:
    return f"thaiid.status.{status}" if status else ""
