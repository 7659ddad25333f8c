"""Rich Console factory and theme for folio output.

Consoles render to a StringIO buffer so renderers keep a plain
``render_result() -> str`` contract. Outside a terminal (tests, pipes)
Rich drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

FOLIO_THEME = Theme(
    {
        "folio.ok": "bold green",
        "folio.error": "bold red",
        "folio.warning": "bold yellow",
        "folio.op": "bold cyan",
        "folio.key": "dim",
        "folio.slug": "bold blue",
        "folio.path": "dim",
        "folio.title": "bold",
        "folio.date": "magenta",
        "folio.status.completed": "green",
        "folio.status.in-progress": "yellow",
        "folio.status.paused": "dim yellow",
        "folio.status.archived": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=FOLIO_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_status(status: str) -> str:
    """Rich style name for a project/experiment status, or ``""``."""
    name = f"folio.status.{status}"
    return name if name in FOLIO_THEME.styles else ""
