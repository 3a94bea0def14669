"""Declarative option schema for the ``linewrap`` command.

Every recognised flag is described once here — name, alias, kind,
default, choices, placeholder, and help text — and the parser in
:mod:`linewrap.cli.options` is generated from this table.  The schema is
built per invocation from :class:`EnvironmentDefaults`, so defaults such
as the terminal width are never stored in module state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from linewrap.core.models import (
    DEFAULT_ELLIPSIS,
    DEFAULT_HYPHEN,
    DEFAULT_INDENT_CHAR,
    DEFAULT_IS_NEWLINE,
    DEFAULT_NEWLINE_REPLACEMENT,
    ENCODINGS,
    EnvironmentDefaults,
    Overflow,
)

OptionKind = Literal["string", "boolean", "multiple", "help"]

PROG: str = "linewrap"

ARGUMENT_NAME: str = "...file"

ARGUMENT_DESCRIPTION: str = (
    'files to wrap and concatenate.  Use "-" for stdin. Default: "-"'
)

DESCRIPTION: str = (
    "Wrap some text, either from file, stdin, or given on the command line.  "
    "Each chunk of text is wrapped independently from one another, and "
    "streamed to stdout (or an outFile, if given).  Command line arguments "
    "with -t/--text are processed before files."
)


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """One command-line option."""

    name: str
    """Long flag name, used verbatim as ``--name``."""

    kind: OptionKind
    description: str
    short: str | None = None
    default: object = None
    """``None`` means no default is shown in help."""

    choices: tuple[str, ...] | None = None
    placeholder: str = "value"

    @property
    def flags(self) -> tuple[str, ...]:
        if self.short is None:
            return (f"--{self.name}",)
        return (f"-{self.short}", f"--{self.name}")

    @property
    def sort_key(self) -> str:
        """Order options by their rendered flags, ignoring dashes."""
        key = f"{self.short},{self.name}" if self.short else self.name
        return key.lower()


def build_option_schema(defaults: EnvironmentDefaults) -> tuple[OptionSpec, ...]:
    """Return every option, sorted in help-display order."""
    specs = (
        OptionSpec(
            name="encoding",
            short="e",
            kind="string",
            default="utf8",
            choices=ENCODINGS,
            placeholder="encoding",
            description=(
                "encoding for files read or written.  stdout is always in the "
                "default encoding."
            ),
        ),
        OptionSpec(
            name="ellipsis",
            kind="string",
            default=DEFAULT_ELLIPSIS,
            placeholder="string",
            description=(
                "What string to use when a word is longer than the max width, "
                'and in overflow mode "clip"'
            ),
        ),
        OptionSpec(
            name="firstCol",
            short="c",
            kind="string",
            default="NaN",
            description=(
                "If outdentFirst is specified, how many columns was the first "
                "line already indented?  If NaN, use the indent width, in "
                "graphemes.  If outdentFirst is false, this is ignored"
            ),
        ),
        OptionSpec(
            name="help",
            short="h",
            kind="help",
            description="display help for command",
        ),
        OptionSpec(
            name="html",
            kind="boolean",
            description="escape output for HTML",
        ),
        OptionSpec(
            name="hyphen",
            kind="string",
            default=DEFAULT_HYPHEN,
            placeholder="string",
            description=(
                "What string to use when a word is longer than the max width, "
                'and in overflow mode "anywhere"'
            ),
        ),
        OptionSpec(
            name="indent",
            short="i",
            kind="string",
            default="",
            placeholder="string|number",
            description=(
                "indent each line with this text.  If a number, indent that "
                "many indentChars"
            ),
        ),
        OptionSpec(
            name="indentChar",
            kind="string",
            default=DEFAULT_INDENT_CHAR,
            placeholder="string",
            description=(
                "if indent is a number, that many indentChars will be inserted "
                "before each line"
            ),
        ),
        OptionSpec(
            name="indentEmpty",
            kind="boolean",
            default=False,
            description="if the input string is empty, should we still indent?",
        ),
        OptionSpec(
            name="isNewline",
            kind="string",
            default=DEFAULT_IS_NEWLINE,
            placeholder="regex",
            description=(
                "a regular expression to replace newlines in the input.  Empty "
                "to leave newlines in place."
            ),
        ),
        OptionSpec(
            name="locale",
            short="l",
            kind="string",
            placeholder="iso location",
            description=(
                "locale for grapheme segmentation.  Has very little effect at "
                "the moment"
            ),
        ),
        OptionSpec(
            name="newline",
            kind="string",
            default=defaults.newline,
            placeholder="string",
            description="how to separate the lines of output",
        ),
        OptionSpec(
            name="newlineReplacement",
            kind="string",
            default=DEFAULT_NEWLINE_REPLACEMENT,
            placeholder="string",
            description="when isNewline matches, replace with this string",
        ),
        OptionSpec(
            name="outFile",
            short="o",
            kind="string",
            placeholder="file",
            description="output to a file instead of stdout",
        ),
        OptionSpec(
            name="outdentFirst",
            kind="boolean",
            default=False,
            description="Do not indent the first output line",
        ),
        OptionSpec(
            name="overflow",
            kind="string",
            default=Overflow.VISIBLE.value,
            choices=tuple(member.value for member in Overflow),
            placeholder="style",
            description="what to do with words that are longer than width.",
        ),
        OptionSpec(
            name="text",
            short="t",
            kind="multiple",
            default=[],
            description=(
                "wrap this chunk of text.  If used, stdin is not processed "
                'unless "-" is used explicitly.  Can be specified multiple times.'
            ),
        ),
        OptionSpec(
            name="verbose",
            short="v",
            kind="boolean",
            description=(
                "turn on super-verbose information.  Not useful for anything "
                "but debugging underlying libraries"
            ),
        ),
        OptionSpec(
            name="width",
            short="w",
            kind="string",
            default=str(defaults.width),
            placeholder="columns",
            description="maximum line length",
        ),
    )
    return tuple(sorted(specs, key=lambda spec: spec.sort_key))
