"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so that
bootstrap paths (``--help``, usage errors) remain functional even when
Rich is not installed.  All diagnostics go to stderr; wrapped text never
passes through here.
"""

from __future__ import annotations

import sys
from typing import Any

from linewrap.exceptions import LineWrapError


class RichUnavailableError(LineWrapError):
    """Raised when Rich is needed but cannot be imported."""


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``RichUnavailableError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise RichUnavailableError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


def escape(text: str) -> str:
    """Escape *text* so Rich prints it literally."""
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text
    return rich_escape(text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except RichUnavailableError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)

    def write(self, text: str) -> None:
        """Write *text* to stderr verbatim — no markup, no wrapping."""
        sys.stderr.write(text)
        sys.stderr.flush()

    def error(self, message: str, hint: str | None = None) -> None:
        """Render an ``Error:`` line and an optional ``Hint:`` line."""
        self.print(f"[bold red]Error:[/bold red] {escape(message)}")
        if hint:
            self.print(f"[yellow]Hint:[/yellow] {escape(hint)}")


console = _ConsoleProxy()
