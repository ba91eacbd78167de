"""
Instruction Assembler
=====================

Pairs operand tokens with the opcode token that follows them.

An instruction is written as two physical lines: an optional operand
line (spaces) and an opcode line (tabs). The assembler holds at most
one pending operand between lines. When an opcode arrives it takes the
pending operand, if any, and emits a complete Instruction straight
away, so each instruction can run before the next line is read.

Two operand lines in a row are a fatal error. An operand still pending
when the input ends is dropped without complaint.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from spacetab.errors import SourceLocation, UnconsumedOperandError
from spacetab.parser import DEFAULT_FILENAME, Token, TokenType


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Instruction:
    """
    One complete instruction.

    Attributes:
        opcode: Tab count of the opcode line
        operand: Space count of the preceding operand line, or None
        location: Location of the opcode line
    """
    opcode: int
    operand: Optional[int] = None
    location: SourceLocation = SourceLocation(DEFAULT_FILENAME, 1)

    def __str__(self) -> str:
        if self.operand is None:
            return f"{self.opcode}"
        return f"{self.opcode} {self.operand}"


class Assembler:
    """
    Builds instructions from a token stream with one line of lookahead.

    Usage:
        asm = Assembler()
        for token in tokens:
            instruction = asm.feed(token)
            if instruction is not None:
                machine.execute(instruction)
        asm.finish()
    """

    def __init__(self):
        self._pending: Optional[int] = None

    @property
    def pending(self) -> Optional[int]:
        """The operand waiting for its opcode, if any."""
        return self._pending

    def feed(self, token: Optional[Token]) -> Optional[Instruction]:
        """
        Consume one token.

        Args:
            token: The parsed line, or None for a blank line

        Returns:
            The completed instruction when the token is an opcode

        Raises:
            UnconsumedOperandError: If an operand arrives while one is pending
        """
        if token is None:
            return None

        if token.type is TokenType.OPERAND:
            if self._pending is not None:
                raise UnconsumedOperandError(
                    self._pending, token.count, location=token.location
                )
            self._pending = token.count
            return None

        operand, self._pending = self._pending, None
        return Instruction(token.count, operand, token.location)

    def finish(self) -> Optional[int]:
        """
        Signal end of input.

        Returns:
            The dangling operand that was discarded, if there was one
        """
        dangling, self._pending = self._pending, None
        if dangling is not None:
            logger.debug(f"Discarding dangling operand {dangling} at end of input")
        return dangling

    def assemble(self, tokens: Iterable[Optional[Token]]) -> Iterator[Instruction]:
        """Yield instructions as soon as each one completes."""
        for token in tokens:
            instruction = self.feed(token)
            if instruction is not None:
                yield instruction
        self.finish()
