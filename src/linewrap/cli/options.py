"""Option resolution: raw argv → :class:`ResolvedConfig`.

The parser is generated from :mod:`linewrap.cli.schema`.  Resolution
fails fast, before any I/O:

* ``-h/--help`` raises :class:`HelpRequested`.
* Unknown flags, values outside an option's choices, a non-numeric or
  non-positive width, and an invalid ``--isNewline`` pattern raise
  :class:`UsageError`.

Both exceptions carry the full help text for the caller to display.
"""

from __future__ import annotations

import argparse
import json
import re
import textwrap
from collections.abc import Sequence
from typing import Any, NoReturn

from linewrap.cli.schema import (
    ARGUMENT_DESCRIPTION,
    ARGUMENT_NAME,
    DESCRIPTION,
    PROG,
    OptionSpec,
    build_option_schema,
)
from linewrap.core.models import (
    STDIN_SENTINEL,
    EnvironmentDefaults,
    Indent,
    LiteralIndent,
    Overflow,
    RepeatIndent,
    ResolvedConfig,
)
from linewrap.exceptions import HelpRequested, UsageError

_INTEGER = re.compile(r"\s*[+-]?[0-9]+\s*")
_INDENT_COUNT = re.compile(r"[0-9]+")


# ---------------------------------------------------------------------------
# Parser construction
# ---------------------------------------------------------------------------

class _HelpFormatter(argparse.HelpFormatter):
    """Render flags as ``-s,--long <placeholder>``."""

    def __init__(self, prog: str) -> None:
        super().__init__(prog, max_help_position=33, width=80)

    def add_usage(
        self,
        usage: str | None,
        actions: Any,
        groups: Any,
        prefix: str | None = None,
    ) -> None:
        super().add_usage(usage, actions, groups, "Usage: " if prefix is None else prefix)

    def _split_lines(self, text: str, width: int) -> list[str]:
        # Sentence spacing ("stdout.  Each") survives wrapping.
        return textwrap.wrap(text.strip(), width)

    def _fill_text(self, text: str, width: int, indent: str) -> str:
        return textwrap.fill(
            text.strip(),
            width,
            initial_indent=indent,
            subsequent_indent=indent,
        )

    def _format_action_invocation(self, action: argparse.Action) -> str:
        if not action.option_strings:
            return super()._format_action_invocation(action)
        flags = ",".join(action.option_strings)
        if action.nargs == 0:
            return flags
        return f"{flags} <{action.metavar}>"


class _OptionParser(argparse.ArgumentParser):
    """Argument parser that raises instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message, help_text=self.format_help())


class _HelpAction(argparse.Action):
    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str = argparse.SUPPRESS,
        default: Any = argparse.SUPPRESS,
        help: str | None = None,  # noqa: A002
    ) -> None:
        super().__init__(
            option_strings=option_strings,
            dest=dest,
            default=default,
            nargs=0,
            help=help,
        )

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        raise HelpRequested("Help requested.", help_text=parser.format_help())


def _help_string(spec: OptionSpec) -> str:
    """Description, then choices, then the default (``%`` escaped for argparse)."""
    parts = [spec.description]
    if spec.choices:
        rendered = ", ".join(json.dumps(choice) for choice in spec.choices)
        parts.append(f"(choices: {rendered})")
    if spec.default is not None:
        parts.append(f"Default: {json.dumps(spec.default, ensure_ascii=False)}")
    return " ".join(parts).replace("%", "%%")


def build_parser(defaults: EnvironmentDefaults) -> argparse.ArgumentParser:
    """Generate the argument parser from the option schema."""
    parser = _OptionParser(
        prog=PROG,
        usage="%(prog)s [options] [...file]",
        description=DESCRIPTION,
        formatter_class=_HelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    arguments = parser.add_argument_group("Arguments")
    arguments.add_argument(
        "file",
        nargs="*",
        metavar=ARGUMENT_NAME,
        help=ARGUMENT_DESCRIPTION,
    )

    options = parser.add_argument_group("Options")
    for spec in build_option_schema(defaults):
        help_text = _help_string(spec)
        if spec.kind == "help":
            options.add_argument(*spec.flags, action=_HelpAction, help=help_text)
        elif spec.kind == "boolean":
            options.add_argument(
                *spec.flags,
                dest=spec.name,
                action="store_true",
                default=bool(spec.default),
                help=help_text,
            )
        elif spec.kind == "multiple":
            options.add_argument(
                *spec.flags,
                dest=spec.name,
                action="append",
                default=None,
                metavar=spec.placeholder,
                help=help_text,
            )
        else:
            options.add_argument(
                *spec.flags,
                dest=spec.name,
                default=spec.default,
                choices=spec.choices,
                metavar=spec.placeholder,
                help=help_text,
            )
    return parser


# ---------------------------------------------------------------------------
# Value parsers (pure)
# ---------------------------------------------------------------------------

def parse_integer(text: str) -> int | None:
    """Parse a decimal integer, or return ``None`` when *text* is not one."""
    if not _INTEGER.fullmatch(text):
        return None
    return int(text)


def parse_indent(text: str, indent_char: str) -> Indent:
    """Resolve ``--indent``: digits are a repeat count, anything else literal."""
    if _INDENT_COUNT.fullmatch(text):
        return RepeatIndent(count=int(text), char=indent_char)
    return LiteralIndent(text=text)


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------

def resolve_options(
    argv: Sequence[str] | None,
    defaults: EnvironmentDefaults,
) -> ResolvedConfig:
    """Resolve *argv* into a :class:`ResolvedConfig`.

    Parameters
    ----------
    argv:
        Raw arguments without the program name.  ``None`` reads
        ``sys.argv[1:]``.
    defaults:
        Environment-derived defaults for width and line terminator.

    Raises
    ------
    HelpRequested
        When ``-h/--help`` is present.
    UsageError
        When any value is invalid.
    """
    parser = build_parser(defaults)
    values = parser.parse_intermixed_args(None if argv is None else list(argv))

    width = parse_integer(str(values.width))
    if width is None or width <= 0:
        parser.error(
            f"argument -w/--width: expected a positive integer, got {values.width!r}",
        )

    try:
        re.compile(values.isNewline)
    except re.error as exc:
        parser.error(f"argument --isNewline: invalid regular expression: {exc}")

    text_fragments = tuple(values.text or ())
    positional_sources = tuple(values.file)
    if not text_fragments and not positional_sources:
        positional_sources = (STDIN_SENTINEL,)

    return ResolvedConfig(
        encoding=values.encoding,
        width=width,
        indent=parse_indent(values.indent, values.indentChar),
        indent_empty=values.indentEmpty,
        indent_first=not values.outdentFirst,
        first_col=parse_integer(values.firstCol),
        overflow=Overflow(values.overflow),
        ellipsis=values.ellipsis,
        hyphen=values.hyphen,
        locale=values.locale,
        newline=values.newline,
        is_newline=values.isNewline,
        newline_replacement=values.newlineReplacement,
        html=values.html,
        out_file=values.outFile,
        text_fragments=text_fragments,
        positional_sources=positional_sources,
        verbose=values.verbose,
    )
