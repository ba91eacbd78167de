"""
Machine
=======

Single-cursor execution engine.

The machine holds a memory store, a cursor naming the active cell, and
a display mode. Every instruction targets the active cell implicitly;
the operand is either a value or an address depending on the opcode.

Instruction Set
---------------
| Opcode | Operand | Effect                                         |
|--------|---------|------------------------------------------------|
| 1      | value   | set active cell                                |
| 2      | address | move cursor                                    |
| 3      | value   | add to active cell                             |
| 4      | value   | subtract from active cell                      |
| 5      | value   | multiply active cell                           |
| 6      | value   | divide active cell (truncating)                |
| 7      | address | copy active cell to address                    |
| 8      | address | move active cell to address, clear active cell |
| 9      | -       | print active cell                              |
| 10     | -       | print line break                               |
| 11     | 0 or 1  | display mode: 0 decimal, 1 ASCII               |

Values are 32-bit signed integers. Operand counts that do not fit raise
ValueConversionError, and arithmetic that leaves the range raises
ArithmeticOverflowError.

Example
-------
>>> import io
>>> out = io.StringIO()
>>> m = Machine(output=out)
>>> m.apply(1, 65)
>>> m.apply(11, 1)
>>> m.apply(9)
>>> out.getvalue()
'A'
"""

import logging
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, TextIO

from spacetab.assembler import Instruction
from spacetab.errors import (
    ArithmeticOverflowError,
    DivisionByZeroError,
    InvalidCodePointError,
    SourceLocation,
    UnrecognizedInstructionError,
    ValueConversionError,
)
from spacetab.memory import MemoryProtocol, SparseMemory


logger = logging.getLogger(__name__)


WORD_MIN = -(2 ** 31)
WORD_MAX = 2 ** 31 - 1

MAX_CODE_POINT = 0x10FFFF
SURROGATE_LOW = 0xD800
SURROGATE_HIGH = 0xDFFF


class DisplayMode(Enum):
    """How opcode 9 renders the active cell."""

    DECIMAL = 0
    ASCII = 1


@dataclass
class MachineState:
    """
    Machine state for inspection.

    Attributes:
        cursor: Active address
        display_mode: Current display mode
        memory: Non-zero cells keyed by address
    """
    cursor: int = 0
    display_mode: DisplayMode = DisplayMode.DECIMAL
    memory: dict[int, int] = field(default_factory=dict)


def to_word(value: int, location: Optional[SourceLocation] = None) -> int:
    """
    Convert an operand count to a machine value.

    Raises:
        ValueConversionError: If the count does not fit a signed 32-bit word
    """
    if not WORD_MIN <= value <= WORD_MAX:
        raise ValueConversionError(value, "i32", location=location)
    return value


def to_char(value: int, location: Optional[SourceLocation] = None) -> str:
    """
    Convert a machine value to the character with that code point.

    Raises:
        InvalidCodePointError: If the value is negative, a surrogate, or
            beyond the last Unicode code point
    """
    if value < 0 or value > MAX_CODE_POINT or SURROGATE_LOW <= value <= SURROGATE_HIGH:
        raise InvalidCodePointError(value, location=location)
    return chr(value)


def _checked(operation: str, result: int, location: Optional[SourceLocation]) -> int:
    if not WORD_MIN <= result <= WORD_MAX:
        raise ArithmeticOverflowError(operation, result, location=location)
    return result


def _truncating_div(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


class Machine:
    """
    Executes instructions against a memory store.

    Each machine owns its state, so several can run side by side.

    Example:
        >>> machine = Machine()
        >>> machine.execute(Instruction(1, 5))
        >>> machine.snapshot().memory
        {0: 5}

    Attributes:
        memory: The memory store (SparseMemory unless one is supplied)
        cursor: Active address
        display_mode: How opcode 9 renders values
        output: Text stream receiving console output
    """

    def __init__(
        self,
        output: Optional[TextIO] = None,
        memory: Optional[MemoryProtocol] = None,
    ):
        """
        Initialize a machine in its default state.

        Args:
            output: Stream for printed output (default: sys.stdout)
            memory: Memory store (default: a fresh SparseMemory)
        """
        self.output = output if output is not None else sys.stdout
        self.memory = memory if memory is not None else SparseMemory()
        self.cursor = 0
        self.display_mode = DisplayMode.DECIMAL
        self.executed = 0

        # Lookup is by opcode and operand presence
        self._unary: dict[int, Callable[[int, Optional[SourceLocation]], None]] = {
            1: self._set,
            2: self._goto,
            3: self._add,
            4: self._subtract,
            5: self._multiply,
            6: self._divide,
            7: self._copy,
            8: self._move,
            11: self._set_mode,
        }
        self._nullary: dict[int, Callable[[Optional[SourceLocation]], None]] = {
            9: self._print_value,
            10: self._print_newline,
        }

    # ========================================
    # Execution
    # ========================================

    def execute(self, instruction: Instruction) -> None:
        """Execute one assembled instruction."""
        self.apply(instruction.opcode, instruction.operand, instruction.location)

    def apply(
        self,
        opcode: int,
        operand: Optional[int] = None,
        location: Optional[SourceLocation] = None,
    ) -> None:
        """
        Execute the instruction selected by opcode and operand presence.

        Raises:
            UnrecognizedInstructionError: If the pair is not in the table
            MachineError: For any runtime fault of the operation itself
        """
        logger.debug(f"exec {opcode} (arg = {operand}) cursor={self.cursor}")

        if operand is None:
            handler = self._nullary.get(opcode)
            if handler is None:
                raise UnrecognizedInstructionError(opcode, operand, location=location)
            handler(location)
        else:
            handler = self._unary.get(opcode)
            if handler is None:
                raise UnrecognizedInstructionError(opcode, operand, location=location)
            handler(operand, location)

        self.executed += 1

    def snapshot(self) -> MachineState:
        """Return a copy of the current state."""
        return MachineState(
            cursor=self.cursor,
            display_mode=self.display_mode,
            memory=self.memory.cells(),
        )

    # ========================================
    # Cell Access
    # ========================================

    def _load(self, location: Optional[SourceLocation]) -> int:
        return self.memory.read(self.cursor, location)

    def _store(self, value: int, location: Optional[SourceLocation]) -> None:
        self.memory.write(self.cursor, value, location)

    # ========================================
    # Operations
    # ========================================

    def _set(self, operand: int, location: Optional[SourceLocation]) -> None:
        self._store(to_word(operand, location), location)

    def _goto(self, operand: int, location: Optional[SourceLocation]) -> None:
        self.cursor = operand

    def _add(self, operand: int, location: Optional[SourceLocation]) -> None:
        value = to_word(operand, location)
        self._store(_checked("add", self._load(location) + value, location), location)

    def _subtract(self, operand: int, location: Optional[SourceLocation]) -> None:
        value = to_word(operand, location)
        self._store(_checked("subtract", self._load(location) - value, location), location)

    def _multiply(self, operand: int, location: Optional[SourceLocation]) -> None:
        value = to_word(operand, location)
        self._store(_checked("multiply", self._load(location) * value, location), location)

    def _divide(self, operand: int, location: Optional[SourceLocation]) -> None:
        divisor = to_word(operand, location)
        if divisor == 0:
            raise DivisionByZeroError(location=location)
        dividend = self._load(location)
        self._store(_checked("divide", _truncating_div(dividend, divisor), location), location)

    def _copy(self, operand: int, location: Optional[SourceLocation]) -> None:
        self.memory.write(operand, self._load(location), location)

    def _move(self, operand: int, location: Optional[SourceLocation]) -> None:
        # Clearing after the write makes a self-move end at zero
        self.memory.write(operand, self._load(location), location)
        self._store(0, location)

    def _set_mode(self, operand: int, location: Optional[SourceLocation]) -> None:
        if operand == 0:
            self.display_mode = DisplayMode.DECIMAL
        elif operand == 1:
            self.display_mode = DisplayMode.ASCII
        else:
            raise UnrecognizedInstructionError(11, operand, location=location)
        logger.debug(f"display mode -> {self.display_mode.name}")

    def _print_value(self, location: Optional[SourceLocation]) -> None:
        value = self._load(location)
        if self.display_mode is DisplayMode.ASCII:
            self._write(to_char(value, location))
        else:
            self._write(str(value))

    def _print_newline(self, location: Optional[SourceLocation]) -> None:
        self._write("\n")

    def _write(self, text: str) -> None:
        self.output.write(text)
        self.output.flush()
