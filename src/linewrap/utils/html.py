"""Markup escaping helpers."""

from __future__ import annotations

import re

_ESCAPES: dict[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "\xa0": "&nbsp;",
}

_ESCAPE_RE = re.compile("[&<>\xa0]")


def html_escape(text: str) -> str:
    """Escape *text* for embedding in HTML.

    Quotes are left alone: wrapped output lands in element content, not
    attribute values.
    """
    return _ESCAPE_RE.sub(lambda m: _ESCAPES[m.group(0)], text)


def identity(text: str) -> str:
    """Return *text* unchanged."""
    return text
