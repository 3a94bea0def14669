"""Tests for option resolution (cli/options.py, cli/schema.py).

Resolution is pure — these tests never touch stdin, stdout, or files.

Coverage:
* Defaults and the implicit ``-`` source.
* Width, firstCol, and indent parsing.
* Repeatable ``--text`` and intermixed positionals.
* Usage errors for unknown flags and invalid values.
* Help requests and help text layout.
"""

from __future__ import annotations

import dataclasses

import pytest

from linewrap.cli.options import (
    build_parser,
    parse_indent,
    parse_integer,
    resolve_options,
)
from linewrap.cli.schema import build_option_schema
from linewrap.core.models import (
    DEFAULT_IS_NEWLINE,
    EnvironmentDefaults,
    LiteralIndent,
    Overflow,
    RepeatIndent,
)
from linewrap.exceptions import HelpRequested, UsageError

DEFAULTS = EnvironmentDefaults(width=80, newline="\n")


def _resolve(*argv: str):
    return resolve_options(list(argv), DEFAULTS)


def _help_text() -> str:
    return build_parser(DEFAULTS).format_help()


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

class TestDefaults:
    def test_no_arguments_reads_stdin(self) -> None:
        config = _resolve()
        assert config.positional_sources == ("-",)
        assert config.text_fragments == ()

    def test_environment_defaults_are_threaded_through(self) -> None:
        config = resolve_options([], EnvironmentDefaults(width=33, newline="\r\n"))
        assert config.width == 33
        assert config.newline == "\r\n"

    def test_engine_defaults(self) -> None:
        config = _resolve()
        assert config.encoding == "utf8"
        assert config.overflow is Overflow.VISIBLE
        assert config.ellipsis == "…"
        assert config.hyphen == "-"
        assert config.indent == LiteralIndent("")
        assert config.indent_first is True
        assert config.indent_empty is False
        assert config.first_col is None
        assert config.is_newline == DEFAULT_IS_NEWLINE
        assert config.newline_replacement == " "
        assert config.html is False
        assert config.out_file is None
        assert config.locale is None
        assert config.verbose is False

    def test_config_is_frozen(self) -> None:
        config = _resolve()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.width = 10  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Value parsing
# ---------------------------------------------------------------------------

class TestParseInteger:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [("0", 0), ("12", 12), ("-3", -3), (" 7 ", 7)],
    )
    def test_integers(self, text: str, expected: int) -> None:
        assert parse_integer(text) == expected

    @pytest.mark.parametrize(
        "text", ["NaN", "", "1.5", "12px", "abc", "\u0668\u0660", "\uff11"],
    )
    def test_non_integers(self, text: str) -> None:
        assert parse_integer(text) is None


class TestParseIndent:
    def test_digits_become_repeat_count(self) -> None:
        assert parse_indent("4", " ") == RepeatIndent(count=4, char=" ")

    def test_zero_is_an_empty_repeat(self) -> None:
        indent = parse_indent("0", " ")
        assert indent == RepeatIndent(count=0, char=" ")
        assert indent.render() == ""

    def test_text_is_literal(self) -> None:
        assert parse_indent("> ", " ") == LiteralIndent("> ")

    def test_signed_number_is_literal(self) -> None:
        assert parse_indent("-2", " ") == LiteralIndent("-2")

    def test_non_ascii_digits_are_literal(self) -> None:
        assert parse_indent("\u0662", " ") == LiteralIndent("\u0662")


class TestWidth:
    def test_explicit_width(self) -> None:
        assert _resolve("-w", "4").width == 4
        assert _resolve("--width", "120").width == 120

    @pytest.mark.parametrize("value", ["0", "-5", "abc", "4.5", "\u0668\u0660"])
    def test_invalid_width_is_usage_error(self, value: str) -> None:
        with pytest.raises(UsageError, match="width"):
            _resolve("--width", value)


class TestIndentOptions:
    def test_numeric_indent_uses_indent_char(self) -> None:
        config = _resolve("-i", "2", "--indentChar", "12")
        assert config.indent == RepeatIndent(count=2, char="12")
        assert config.indent.render() == "1212"

    def test_literal_indent(self) -> None:
        assert _resolve("--indent", "# ").indent == LiteralIndent("# ")

    def test_outdent_first_inverts_indent_first(self) -> None:
        assert _resolve("--outdentFirst").indent_first is False

    def test_first_col_number(self) -> None:
        assert _resolve("-c", "0").first_col == 0

    def test_first_col_nan_is_none(self) -> None:
        assert _resolve("-c", "NaN").first_col is None
        assert _resolve("-c", "whatever").first_col is None


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------

class TestSources:
    def test_text_fragments_accumulate_in_order(self) -> None:
        config = _resolve("-t", "one", "--text", "two", "-t", "three")
        assert config.text_fragments == ("one", "two", "three")
        assert config.positional_sources == ()

    def test_explicit_dash_with_text(self) -> None:
        config = _resolve("-t", "one", "-")
        assert config.text_fragments == ("one",)
        assert config.positional_sources == ("-",)

    def test_positionals_keep_order_when_intermixed(self) -> None:
        config = _resolve("a.txt", "-w", "4", "b.txt", "-", "c.txt")
        assert config.positional_sources == ("a.txt", "b.txt", "-", "c.txt")
        assert config.width == 4

    def test_empty_text_fragment_is_kept(self) -> None:
        assert _resolve("-t", "").text_fragments == ("",)


# ---------------------------------------------------------------------------
# Choices and patterns
# ---------------------------------------------------------------------------

class TestChoices:
    @pytest.mark.parametrize("style", ["visible", "clip", "anywhere"])
    def test_overflow_choices(self, style: str) -> None:
        assert _resolve("--overflow", style).overflow is Overflow(style)

    def test_bad_overflow_is_usage_error(self) -> None:
        with pytest.raises(UsageError) as exc_info:
            _resolve("--overflow", "foo")
        assert "foo" in str(exc_info.value)
        assert exc_info.value.help_text.startswith("Usage: linewrap")

    def test_encoding_choice(self) -> None:
        assert _resolve("-e", "utf16le").encoding == "utf16le"

    def test_bad_encoding_is_usage_error(self) -> None:
        with pytest.raises(UsageError):
            _resolve("--encoding", "ebcdic")

    def test_invalid_newline_pattern_is_usage_error(self) -> None:
        with pytest.raises(UsageError, match="isNewline"):
            _resolve("--isNewline", "(")

    def test_empty_newline_pattern_is_allowed(self) -> None:
        assert _resolve("--isNewline", "").is_newline == ""


class TestUsageErrors:
    def test_unknown_flag(self) -> None:
        with pytest.raises(UsageError):
            _resolve("--bogus")

    def test_abbreviations_are_not_accepted(self) -> None:
        with pytest.raises(UsageError):
            _resolve("--wid", "4")

    def test_missing_value(self) -> None:
        with pytest.raises(UsageError):
            _resolve("--width")

    def test_help_is_a_usage_error(self) -> None:
        assert issubclass(HelpRequested, UsageError)


# ---------------------------------------------------------------------------
# Help
# ---------------------------------------------------------------------------

class TestHelp:
    def test_help_flag_short_circuits(self) -> None:
        with pytest.raises(HelpRequested) as exc_info:
            _resolve("-h", "-w", "80")
        assert exc_info.value.help_text.startswith("Usage: linewrap")
        assert "Options:" in exc_info.value.help_text

    def test_long_help_flag(self) -> None:
        with pytest.raises(HelpRequested):
            _resolve("--help")

    def test_layout(self) -> None:
        text = _help_text()
        lines = text.splitlines()
        assert lines[0] == "Usage: linewrap [options] [...file]"
        assert "Arguments:" in lines
        assert "Options:" in lines
        assert lines.index("Arguments:") < lines.index("Options:")
        assert "...file" in text

    def test_sentence_spacing_is_kept(self) -> None:
        assert "command line.  Each" in _help_text()

    def test_option_rendering(self) -> None:
        text = " ".join(_help_text().split())
        assert "-c,--firstCol <value>" in text
        assert "-e,--encoding <encoding>" in text
        assert "--overflow <style>" in text
        assert "-h,--help" in text
        assert 'Default: "visible"' in text
        assert 'Default: "80"' in text
        assert "Default: []" in text

    def test_options_sorted_by_flag_text(self) -> None:
        text = _help_text()
        order = [
            "-c,--firstCol",
            "-e,--encoding",
            "--ellipsis",
            "-h,--help",
            "--html",
            "--hyphen",
            "-i,--indent ",
            "--indentChar",
            "--indentEmpty",
            "--isNewline",
            "-l,--locale",
            "--newline ",
            "--newlineReplacement",
            "-o,--outFile",
            "--outdentFirst",
            "--overflow",
            "-t,--text",
            "-v,--verbose",
            "-w,--width",
        ]
        positions = [text.index(flag) for flag in order]
        assert positions == sorted(positions)

    def test_schema_covers_every_flag_once(self) -> None:
        names = [spec.name for spec in build_option_schema(DEFAULTS)]
        assert len(names) == len(set(names))
        assert {"encoding", "text", "width", "help", "isNewline"} <= set(names)
