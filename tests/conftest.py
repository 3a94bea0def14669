"""Shared pytest fixtures and configuration for the linewrap test suite.

Guidelines
----------
* No network access in any test.
* Standard input is faked per test — never read the real stdin.
* Files are only written under ``tmp_path``.
* Tests must not depend on the real terminal size.
"""

from __future__ import annotations

import io
import sys
from collections.abc import Callable

import pytest


@pytest.fixture(autouse=True)
def _fixed_terminal_width(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pin the detected terminal width to 80 columns."""
    monkeypatch.setenv("COLUMNS", "80")


@pytest.fixture
def feed_stdin(monkeypatch: pytest.MonkeyPatch) -> Callable[[str | bytes], None]:
    """Return a helper that replaces ``sys.stdin`` with the given content."""

    def _feed(content: str | bytes) -> None:
        data = content.encode("utf-8") if isinstance(content, str) else content
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))

    return _feed
