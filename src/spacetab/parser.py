"""
Line Parser
===========

Classifies one program line by counting its whitespace.

Only two characters carry meaning: the space and the tab. Everything
else on a line is filler and is skipped, so programs may be annotated
freely as long as the annotations avoid whitespace.

| spaces | tabs | result            |
|--------|------|-------------------|
| 0      | 0    | None (blank line) |
| n > 0  | 0    | OPERAND(n)        |
| 0      | n > 0| OPCODE(n)         |
| n > 0  | m > 0| MixedLineError    |

Example
-------
>>> from spacetab.parser import parse_line
>>> parse_line("set:  ")
Token(OPERAND, 2, <input>:1)
>>> parse_line("print\\t\\t\\t\\t\\t\\t\\t\\t\\t")
Token(OPCODE, 9, <input>:1)
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Iterator, Optional

from spacetab.errors import MixedLineError, SourceLocation


DEFAULT_FILENAME = "<input>"


class TokenType(Enum):
    """The two kinds of significant line."""

    OPERAND = auto()    # line of spaces
    OPCODE = auto()     # line of tabs


@dataclass(frozen=True)
class Token:
    """
    A classified program line.

    Attributes:
        type: OPERAND or OPCODE
        count: Number of spaces (operand) or tabs (opcode) on the line
        location: Where the line came from
    """
    type: TokenType
    count: int
    location: SourceLocation = SourceLocation(DEFAULT_FILENAME, 1)

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.count}, {self.location})"


def parse_line(
    line: str,
    line_number: int = 1,
    filename: str = DEFAULT_FILENAME,
) -> Optional[Token]:
    """
    Parse a single line of source.

    A trailing line terminator is ignored, so lines read straight from a
    stream can be passed in unchanged.

    Args:
        line: Line text
        line_number: 1-indexed line number for error reporting
        filename: Source name for error reporting

    Returns:
        The token for the line, or None for a blank line

    Raises:
        MixedLineError: If the line contains both spaces and tabs
    """
    line = line.rstrip("\r\n")
    spaces = line.count(" ")
    tabs = line.count("\t")
    location = SourceLocation(filename, line_number)

    if spaces and tabs:
        raise MixedLineError(spaces, tabs, line, location=location)
    if spaces:
        return Token(TokenType.OPERAND, spaces, location)
    if tabs:
        return Token(TokenType.OPCODE, tabs, location)
    return None


def iter_tokens(lines: Iterable[str], filename: str = DEFAULT_FILENAME) -> Iterator[Token]:
    """Yield the tokens of a program, one per non-blank line, in order."""
    for line_number, line in enumerate(lines, start=1):
        token = parse_line(line, line_number, filename)
        if token is not None:
            yield token
