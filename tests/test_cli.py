"""
sclex CLI Test Suite
====================

Tests for the ``sclex`` token printer, run through Click's CliRunner.
"""

import json

import pytest
from click.testing import CliRunner

from scriptlex.cli.errors import ExitCode
from scriptlex.cli.sclex import format_tokens, main
from scriptlex.lexer import tokenize


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep SCRIPTLEX_* settings from the outer environment out of the tests."""
    for name in ("SCRIPTLEX_FORMAT", "SCRIPTLEX_STRICT", "SCRIPTLEX_VERBOSE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def runner():
    return CliRunner()


# =============================================================================
# Basic Invocation
# =============================================================================

class TestSclexCLI:
    """Tests for the sclex CLI tool."""

    def test_cli_help(self, runner):
        """Test CLI help output."""
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Print the tokens" in result.output

    def test_cli_version(self, runner):
        """Test CLI version output."""
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert "sclex" in result.output

    def test_expr_text_output(self, runner):
        """-e prints one KIND<TAB>text line per token."""
        result = runner.invoke(main, ["-e", "let x = 5;"])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "LET\tlet",
            "IDENT\tx",
            "ASSIGN\t=",
            "INT\t5",
            "SEMICOLON\t;",
            "EOF\tEOF",
        ]

    def test_file_input(self, runner, tmp_path):
        """A source file is read and scanned."""
        source = tmp_path / "prog.src"
        source.write_text("fn(a) {\n  a != 1\n}\n")

        result = runner.invoke(main, [str(source)])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "FUNCTION\tfn"
        assert "NOT_EQ\t!=" in lines
        assert lines[-1] == "EOF\tEOF"

    def test_stdin_input(self, runner):
        """With no file and no -e, stdin is scanned."""
        result = runner.invoke(main, [], input="1 + 2")

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "INT\t1",
            "PLUS\t+",
            "INT\t2",
            "EOF\tEOF",
        ]

    def test_no_eof(self, runner):
        """--no-eof drops the trailing EOF token."""
        result = runner.invoke(main, ["-e", "x", "--no-eof"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["IDENT\tx"]

    def test_json_output(self, runner):
        """--format json prints an array of kind/text objects."""
        result = runner.invoke(main, ["-e", "a==b", "--format", "json"])

        assert result.exit_code == 0
        assert json.loads(result.output) == [
            {"kind": "IDENT", "text": "a"},
            {"kind": "EQ", "text": "=="},
            {"kind": "IDENT", "text": "b"},
            {"kind": "EOF", "text": "EOF"},
        ]

    def test_file_and_expr_conflict(self, runner, tmp_path):
        """Giving both a file and -e is a usage error."""
        source = tmp_path / "prog.src"
        source.write_text("x")

        result = runner.invoke(main, [str(source), "-e", "y"])

        assert result.exit_code == 2

    def test_missing_file(self, runner, tmp_path):
        """A nonexistent input file is rejected by Click."""
        result = runner.invoke(main, [str(tmp_path / "missing.src")])

        assert result.exit_code == 2


# =============================================================================
# Strict Mode and Configuration
# =============================================================================

class TestSclexStrict:
    """Illegal characters and configuration handling."""

    def test_illegal_is_printed_by_default(self, runner):
        """Without --strict, ILLEGAL tokens are just output."""
        result = runner.invoke(main, ["-e", "5 <> @"])

        assert result.exit_code == ExitCode.SUCCESS
        assert "ILLEGAL\t@" in result.output

    def test_strict_fails_on_illegal(self, runner):
        """--strict exits with LEX_ERROR and names the character."""
        result = runner.invoke(main, ["-e", "5 <> @", "--strict"])

        assert result.exit_code == ExitCode.LEX_ERROR
        assert "illegal character '@'" in result.output

    def test_strict_passes_clean_source(self, runner):
        """--strict has no effect on clean source."""
        result = runner.invoke(main, ["-e", "let x = 5;", "--strict"])

        assert result.exit_code == ExitCode.SUCCESS

    def test_strict_from_env(self, runner, monkeypatch):
        """SCRIPTLEX_STRICT turns strict mode on."""
        monkeypatch.setenv("SCRIPTLEX_STRICT", "1")

        result = runner.invoke(main, ["-e", "#"])

        assert result.exit_code == ExitCode.LEX_ERROR

    def test_no_strict_overrides_env(self, runner, monkeypatch):
        """--no-strict wins over the environment."""
        monkeypatch.setenv("SCRIPTLEX_STRICT", "yes")

        result = runner.invoke(main, ["-e", "#", "--no-strict"])

        assert result.exit_code == ExitCode.SUCCESS

    def test_format_from_env(self, runner, monkeypatch):
        """SCRIPTLEX_FORMAT selects the output format."""
        monkeypatch.setenv("SCRIPTLEX_FORMAT", "json")

        result = runner.invoke(main, ["-e", "x"])

        assert result.exit_code == 0
        assert json.loads(result.output)[0] == {"kind": "IDENT", "text": "x"}

    def test_bad_env_value(self, runner, monkeypatch):
        """An invalid environment value is an argument error."""
        monkeypatch.setenv("SCRIPTLEX_FORMAT", "xml")

        result = runner.invoke(main, ["-e", "x"])

        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "unknown output format" in result.output

    def test_verbose_summary(self, runner):
        """-v reports a scan summary."""
        result = runner.invoke(main, ["-e", "a @", "-v"])

        assert result.exit_code == 0
        assert "3 tokens, 1 illegal" in result.output


# =============================================================================
# Formatting
# =============================================================================

class TestFormatTokens:
    """Direct tests of the output formatter."""

    def test_text_format(self):
        assert format_tokens(tokenize("!x"), "text") == "BANG\t!\nIDENT\tx\nEOF\tEOF"

    def test_empty_token_list(self):
        assert format_tokens([], "text") == ""
        assert json.loads(format_tokens([], "json")) == []


# =============================================================================
# Output Edge Cases
# =============================================================================

class TestSclexOutput:
    """Empty output and verbosity switches."""

    def test_no_tokens_prints_nothing(self, runner):
        """An empty source with --no-eof prints no blank line."""
        result = runner.invoke(main, ["-e", "", "--no-eof"])

        assert result.exit_code == 0
        assert result.output == ""

    def test_no_tokens_json(self, runner):
        """JSON output is an empty array when nothing is shown."""
        result = runner.invoke(main, ["-e", "  ", "--no-eof", "-f", "json"])

        assert result.exit_code == 0
        assert json.loads(result.output) == []

    def test_stdin_empty(self, runner):
        """Empty stdin gives only the EOF token."""
        result = runner.invoke(main, [], input="")

        assert result.exit_code == 0
        assert result.output.splitlines() == ["EOF\tEOF"]

    def test_quiet_overrides_env(self, runner, monkeypatch):
        """--quiet turns off SCRIPTLEX_VERBOSE."""
        monkeypatch.setenv("SCRIPTLEX_VERBOSE", "1")

        result = runner.invoke(main, ["-e", "a @", "--quiet"])

        assert result.exit_code == 0
        assert "illegal" not in result.output.replace("ILLEGAL", "")
        assert "Scanned" not in result.output

    def test_verbose_from_env(self, runner, monkeypatch):
        """SCRIPTLEX_VERBOSE alone enables the summary."""
        monkeypatch.setenv("SCRIPTLEX_VERBOSE", "1")

        result = runner.invoke(main, ["-e", "a"])

        assert result.exit_code == 0
        assert "Scanned 1 characters: 2 tokens, 0 illegal" in result.output
