"""
Tests for the spacetab command-line interface
=============================================

These tests drive the click command through CliRunner, feeding
programs on standard input or from files.
"""

import pytest
from click.testing import CliRunner

from spacetab import __version__
from spacetab.cli.errors import ExitCode
from spacetab.cli.spacetab import main


PRINT_ONE = " \n\t\n" + "\t" * 9 + "\n"


@pytest.fixture
def runner():
    return CliRunner()


# =============================================================================
# Successful Runs
# =============================================================================

class TestRun:
    """Programs run from stdin or a file."""

    def test_stdin(self, runner):
        result = runner.invoke(main, [], input=PRINT_ONE)
        assert result.exit_code == 0
        assert result.output == "1"

    def test_file(self, runner, tmp_path):
        program = tmp_path / "one.st"
        program.write_text(PRINT_ONE)
        result = runner.invoke(main, [str(program)])
        assert result.exit_code == 0
        assert result.output == "1"

    def test_empty_program(self, runner):
        result = runner.invoke(main, [], input="")
        assert result.exit_code == 0
        assert result.output == ""

    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Run a spacetab program" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# =============================================================================
# Error Reporting
# =============================================================================

class TestErrors:
    """Faults go to stderr with an error prefix and exit code 1."""

    def test_mixed_line(self, runner):
        result = runner.invoke(main, [], input=" \t\n")
        assert result.exit_code == ExitCode.PROGRAM_ERROR
        assert result.stdout == ""
        assert result.stderr.startswith("<stdin>:1: error:")
        assert "1 spaces and 1 tabs" in result.stderr

    def test_output_before_error_is_kept(self, runner):
        program = PRINT_ONE + "\n\t\t\t\n"   # opcode 3 without operand
        result = runner.invoke(main, [], input=program)
        assert result.exit_code == ExitCode.PROGRAM_ERROR
        assert result.stdout == "1"
        assert "unrecognized action 3" in result.stderr

    def test_memory_size_zero(self, runner):
        result = runner.invoke(main, ["--memory-size", "0"], input=PRINT_ONE)
        assert result.exit_code == ExitCode.PROGRAM_ERROR
        assert result.stdout == ""
        assert "out of bounds" in result.stderr

    def test_negative_memory_size(self, runner):
        result = runner.invoke(main, ["--memory-size=-1"], input=PRINT_ONE)
        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, [str(tmp_path / "missing.st")])
        assert result.exit_code == ExitCode.INVALID_ARGS


# =============================================================================
# Line Endings and Decoding
# =============================================================================

class TestLineEndings:
    """Only line feeds split lines; other control characters are filler."""

    def test_carriage_return_inside_line(self, runner, tmp_path):
        program = tmp_path / "cr.st"
        program.write_bytes(b" \r \n\t\n" + b"\t" * 9 + b"\n")
        result = runner.invoke(main, [str(program)])
        assert result.exit_code == 0
        assert result.stdout == "2"

    def test_crlf_line_endings(self, runner):
        result = runner.invoke(main, [], input=b" \r\n\t\r\n" + b"\t" * 9 + b"\r\n")
        assert result.exit_code == 0
        assert result.stdout == "1"

    def test_form_feed_inside_line(self, runner):
        result = runner.invoke(main, [], input=b"  \x0c  \n\t\n" + b"\t" * 9 + b"\n")
        assert result.exit_code == 0
        assert result.stdout == "4"

    def test_invalid_utf8_after_output(self, runner, tmp_path):
        """Lines before an undecodable one still run."""
        program = tmp_path / "bad.st"
        program.write_bytes(b" \n\t\n" + b"\t" * 9 + b"\n\xff\n")
        result = runner.invoke(main, [str(program)])
        assert result.exit_code == ExitCode.PROGRAM_ERROR
        assert result.stdout == "1"
        assert result.stderr.startswith("error: cannot decode program text")

    def test_utf8_filler(self, runner):
        result = runner.invoke(main, [], input="é \n\t→\n" + "\t" * 9 + "\n")
        assert result.exit_code == 0
        assert result.stdout == "1"
