"""Domain models for linewrap.

All models are **frozen** dataclasses — immutable value objects created
once per invocation.  They carry zero I/O and must remain pure across
the entire lifecycle.
"""

from __future__ import annotations

import enum
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal, Union


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Overflow(str, enum.Enum):
    """What happens to an unbreakable word wider than the line."""

    VISIBLE = "visible"
    CLIP = "clip"
    ANYWHERE = "anywhere"


ENCODINGS: tuple[str, ...] = (
    "ascii",
    "utf8",
    "utf-8",
    "utf16le",
    "ucs2",
    "ucs-2",
    "base64",
    "base64url",
    "latin1",
    "binary",
    "hex",
)
"""Encoding names accepted by ``-e/--encoding``."""

STDIN_SENTINEL: str = "-"


# ---------------------------------------------------------------------------
# Engine defaults
# ---------------------------------------------------------------------------

DEFAULT_ELLIPSIS: str = "\u2026"
DEFAULT_HYPHEN: str = "-"
DEFAULT_INDENT_CHAR: str = " "
DEFAULT_NEWLINE_REPLACEMENT: str = " "
DEFAULT_IS_NEWLINE: str = (
    r"[^\S\r\n\v\f\x85\u2028\u2029]*[\r\n\v\f\x85\u2028\u2029]+\s*"
)
"""Horizontal whitespace, a run of line breaks, then any whitespace."""


# ---------------------------------------------------------------------------
# Indentation variant
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class LiteralIndent:
    """Indent every line with *text* verbatim."""

    text: str

    def render(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class RepeatIndent:
    """Indent every line with *char* repeated *count* times."""

    count: int
    char: str = " "

    def render(self) -> str:
        return self.char * self.count


Indent = Union[LiteralIndent, RepeatIndent]


# ---------------------------------------------------------------------------
# Invocation configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class EnvironmentDefaults:
    """Defaults derived from the process environment at startup."""

    width: int
    """Detected terminal width in columns."""

    newline: str
    """Platform line terminator."""


@dataclass(frozen=True, slots=True)
class ResolvedConfig:
    """Fully-typed result of resolving the command line."""

    encoding: str
    width: int
    indent: Indent
    indent_empty: bool
    indent_first: bool
    first_col: int | None
    """``None`` means "use the rendered indent width"."""

    overflow: Overflow
    ellipsis: str
    hyphen: str
    locale: str | None
    newline: str
    is_newline: str
    """Pattern text; the empty string disables newline normalization."""

    newline_replacement: str
    html: bool
    out_file: str | None
    text_fragments: tuple[str, ...]
    positional_sources: tuple[str, ...]
    verbose: bool


# ---------------------------------------------------------------------------
# Engine configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class WrapOptions:
    """Configuration consumed by the line-wrapping engine."""

    width: int
    indent: Indent
    indent_empty: bool
    indent_first: bool
    first_col: int | None
    overflow: Overflow
    ellipsis: str
    hyphen: str
    locale: str | None
    newline: str
    is_newline: re.Pattern[str] | None
    newline_replacement: str
    escape: Callable[[str], str]


# ---------------------------------------------------------------------------
# Text sources
# ---------------------------------------------------------------------------

SourceKind = Literal["text", "stdin", "file"]


@dataclass(frozen=True, slots=True)
class TextSource:
    """One independently wrapped unit of input."""

    kind: SourceKind
    value: str
    """Literal text for ``"text"``, a path for ``"file"``, ``"-"`` for stdin."""
