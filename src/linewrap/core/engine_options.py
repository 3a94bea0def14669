"""Translate a :class:`ResolvedConfig` into engine :class:`WrapOptions`.

Pure transformation — no I/O.  The resolver has already validated every
value, so nothing here raises for user input.
"""

from __future__ import annotations

import re

from linewrap.core.models import ResolvedConfig, WrapOptions
from linewrap.utils.html import html_escape, identity


def compile_newline_pattern(pattern: str) -> re.Pattern[str] | None:
    """Compile the ``--isNewline`` pattern, or ``None`` when it is empty."""
    if not pattern:
        return None
    return re.compile(pattern)


def build_wrap_options(config: ResolvedConfig) -> WrapOptions:
    """Build the engine configuration for *config*.

    ``first_col`` only matters when the first line is outdented; it is
    dropped otherwise so the engine never sees a stale hint.
    """
    return WrapOptions(
        width=config.width,
        indent=config.indent,
        indent_empty=config.indent_empty,
        indent_first=config.indent_first,
        first_col=None if config.indent_first else config.first_col,
        overflow=config.overflow,
        ellipsis=config.ellipsis,
        hyphen=config.hyphen,
        locale=config.locale,
        newline=config.newline,
        is_newline=compile_newline_pattern(config.is_newline),
        newline_replacement=config.newline_replacement,
        escape=html_escape if config.html else identity,
    )
