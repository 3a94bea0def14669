"""Infrastructure: the line-wrapping engine.

Implements :class:`~linewrap.core.protocols.LineWrapper` on top of
Rich's terminal cell-width tables.  The engine is configured once with
a :class:`~linewrap.core.models.WrapOptions` and then wraps any number
of independent text units.

Model
-----
* Break opportunities are runs of breaking whitespace.  No-break spaces
  (U+00A0, U+2007, U+202F) stay inside words.
* Width is counted in terminal cells over grapheme clusters, where a
  cluster is a code point plus the zero-width code points after it.
* A tab between words advances to the next multiple of 8 columns,
  counted from the start of the output line.
* Leading and trailing whitespace of a paragraph, and whitespace at a
  break, is trimmed.
* Hard line breaks left over after ``is_newline`` normalization start a
  new paragraph.
* The escape hook runs on finished lines, after every width decision.

``locale`` is carried for callers that inspect the options; it does
not change segmentation here.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from rich.cells import cell_len

from linewrap.core.models import Overflow, WrapOptions

_HARD_BREAK = re.compile(r"\r\n|[\n\v\f\r\x85\u2028\u2029]")
_BREAK_SPACE = re.compile(r"([^\S\xa0\u2007\u202f]+)")
_TAB_SIZE = 8


def _gap_width(gap: str, column: int) -> int:
    """Cells taken by the whitespace *gap* when it starts at *column*.

    A tab advances to the next tab stop; any other whitespace counts at
    least one cell.
    """
    end = column
    for ch in gap:
        if ch == "\t":
            end += _TAB_SIZE - end % _TAB_SIZE
        else:
            end += max(1, cell_len(ch))
    return end - column


def _graphemes(text: str) -> Iterator[str]:
    """Yield approximate grapheme clusters of *text*."""
    cluster = ""
    for ch in text:
        if cluster and cell_len(ch) == 0:
            cluster += ch
            continue
        if cluster:
            yield cluster
        cluster = ch
    if cluster:
        yield cluster


class LineWrap:
    """Greedy line wrapper.

    Parameters
    ----------
    options:
        Fully resolved engine configuration.
    """

    def __init__(self, options: WrapOptions) -> None:
        self._options: WrapOptions = options
        self._indent: str = options.indent.render()
        self._indent_width: int = cell_len(self._indent)

    @property
    def options(self) -> WrapOptions:
        return self._options

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def wrap(self, text: str) -> str:
        """Wrap *text* and join the lines with ``options.newline``."""
        opts = self._options
        if opts.is_newline is not None:
            replacement = opts.newline_replacement
            text = opts.is_newline.sub(lambda _m: replacement, text)

        lines: list[str] = []
        for paragraph in _HARD_BREAK.split(text):
            self._wrap_paragraph(paragraph, lines)
        return opts.newline.join(lines)

    # ------------------------------------------------------------------
    # Line geometry
    # ------------------------------------------------------------------

    def _outdented(self, index: int) -> bool:
        return index == 0 and not self._options.indent_first

    def _prefix(self, index: int) -> str:
        return "" if self._outdented(index) else self._indent

    def _start_col(self, index: int) -> int:
        """Column where the text of output line *index* begins."""
        if self._outdented(index) and self._options.first_col is not None:
            return self._options.first_col
        return self._indent_width

    def _available(self, index: int) -> int:
        """Columns left for text on output line *index* (never below 1)."""
        return max(1, self._options.width - self._start_col(index))

    def _emit(self, lines: list[str], text: str) -> None:
        index = len(lines)
        prefix = self._prefix(index)
        if not text and not self._options.indent_empty:
            prefix = ""
        lines.append(prefix + self._options.escape(text))

    # ------------------------------------------------------------------
    # Wrapping
    # ------------------------------------------------------------------

    def _wrap_paragraph(self, paragraph: str, lines: list[str]) -> None:
        line = ""
        line_width = 0
        gap = ""
        for i, token in enumerate(_BREAK_SPACE.split(paragraph)):
            if i % 2:
                gap = token
                continue
            if not token:
                continue
            word_width = cell_len(token)
            if line:
                column = self._start_col(len(lines)) + line_width
                gap_width = _gap_width(gap, column)
                if line_width + gap_width + word_width <= self._available(len(lines)):
                    line += gap + token
                    line_width += gap_width + word_width
                    continue
                self._emit(lines, line)
            line, line_width = self._start_line(lines, token, word_width)
        self._emit(lines, line)

    def _start_line(
        self,
        lines: list[str],
        word: str,
        word_width: int,
    ) -> tuple[str, int]:
        """Place *word* at the start of a line, applying the overflow rule.

        Returns the text and width left on the (still open) current line.
        """
        opts = self._options
        avail = self._available(len(lines))
        if word_width <= avail or opts.overflow is Overflow.VISIBLE:
            return word, word_width

        if opts.overflow is Overflow.CLIP:
            ellipsis_width = cell_len(opts.ellipsis)
            kept, kept_width = "", 0
            for grapheme in _graphemes(word):
                width = cell_len(grapheme)
                if kept_width + width + ellipsis_width > avail:
                    break
                kept += grapheme
                kept_width += width
            return kept + opts.ellipsis, kept_width + ellipsis_width

        # Overflow.ANYWHERE: every piece but the last carries the hyphen.
        hyphen_width = cell_len(opts.hyphen)
        piece, piece_width = "", 0
        for grapheme in _graphemes(word):
            width = cell_len(grapheme)
            if piece and piece_width + width + hyphen_width > avail:
                self._emit(lines, piece + opts.hyphen)
                avail = self._available(len(lines))
                piece, piece_width = "", 0
            piece += grapheme
            piece_width += width
        return piece, piece_width
