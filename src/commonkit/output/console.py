"""Rich Console factory and theme for commonkit output.

Consoles render to a StringIO buffer so formatting stays a pure
``ServiceResult -> str`` function.  In non-TTY environments (tests, pipes)
Rich disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

CK_THEME = Theme(
    {
        "ck.ok": "bold green",
        "ck.error": "bold red",
        "ck.warning": "bold yellow",
        "ck.op": "bold cyan",
        "ck.key": "dim",
        "ck.hint": "italic",
        "ck.type": "bold blue",
        "ck.visibility.public": "green",
        "ck.visibility.protected": "yellow",
        "ck.visibility.package": "yellow",
        "ck.visibility.private": "red",
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
        theme=CK_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_visibility(visibility: str) -> str:
    return f"ck.visibility.{visibility}" if visibility else ""
