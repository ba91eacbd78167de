# =============================================================================
# test_parser.py - Line Parser Unit Tests
# =============================================================================
# Tests for line classification by whitespace count.
#
# Test coverage includes:
#   - Blank lines and filler-only lines
#   - Operand (space) and opcode (tab) lines
#   - Mixed lines and the counts they report
#   - Line terminators and location tracking
# =============================================================================

import pytest
from spacetab.parser import Token, TokenType, iter_tokens, parse_line
from spacetab.errors import MixedLineError, ParseError, SourceLocation


# =============================================================================
# Blank Line Tests
# =============================================================================

class TestBlankLines:
    """Lines without spaces or tabs produce no token."""

    def test_empty_line(self):
        assert parse_line("") is None

    def test_filler_only(self):
        """Non-whitespace characters are ignored."""
        assert parse_line("just-a-comment;123") is None

    def test_repeated_parse_is_stable(self):
        """Parsing a blank line again never changes the result."""
        for _ in range(3):
            assert parse_line("abc") is None

    def test_newline_only(self):
        """A bare line terminator counts as blank."""
        assert parse_line("\n") is None
        assert parse_line("\r\n") is None


# =============================================================================
# Operand and Opcode Tests
# =============================================================================

class TestTokens:
    """Space lines are operands, tab lines are opcodes."""

    def test_single_space(self):
        token = parse_line(" ")
        assert token.type == TokenType.OPERAND
        assert token.count == 1

    def test_spaces_with_filler(self):
        """Spaces anywhere on the line are counted."""
        token = parse_line(" set x to  two ")
        assert token.type == TokenType.OPERAND
        assert token.count == 6

    def test_tabs(self):
        token = parse_line("\t" * 9)
        assert token.type == TokenType.OPCODE
        assert token.count == 9

    def test_tabs_with_filler(self):
        token = parse_line("print\tit\t")
        assert token.type == TokenType.OPCODE
        assert token.count == 2

    def test_trailing_newline_ignored(self):
        """Stream lines keep their terminator; it is not whitespace."""
        token = parse_line("\t\t\n")
        assert token == Token(TokenType.OPCODE, 2, SourceLocation("<input>", 1))

    def test_location(self):
        token = parse_line("  ", line_number=7, filename="prog.st")
        assert token.location == SourceLocation("prog.st", 7)
        assert str(token.location) == "prog.st:7"


# =============================================================================
# Mixed Line Tests
# =============================================================================

class TestMixedLines:
    """A line holding both spaces and tabs is rejected."""

    @pytest.mark.parametrize("spaces,tabs", [(1, 1), (3, 2), (2, 11)])
    def test_reports_both_counts(self, spaces, tabs):
        line = " " * spaces + "x" + "\t" * tabs
        with pytest.raises(MixedLineError) as exc_info:
            parse_line(line)
        assert exc_info.value.spaces == spaces
        assert exc_info.value.tabs == tabs
        assert exc_info.value.line == line

    def test_is_parse_error(self):
        with pytest.raises(ParseError):
            parse_line(" \t")

    def test_message(self):
        with pytest.raises(MixedLineError) as exc_info:
            parse_line("a \t", line_number=3, filename="prog.st")
        message = str(exc_info.value)
        assert message.startswith("prog.st:3: error:")
        assert "1 spaces and 1 tabs" in message


# =============================================================================
# Token Stream Tests
# =============================================================================

class TestIterTokens:
    """iter_tokens skips blank lines and numbers lines from 1."""

    def test_skips_blank_lines(self):
        tokens = list(iter_tokens(["", " ", "comment", "\t"]))
        assert [t.type for t in tokens] == [TokenType.OPERAND, TokenType.OPCODE]
        assert [t.location.line for t in tokens] == [2, 4]

    def test_stops_at_mixed_line(self):
        tokens = iter_tokens([" ", " \t", "\t"])
        assert next(tokens).count == 1
        with pytest.raises(MixedLineError):
            next(tokens)
