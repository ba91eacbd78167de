"""
spacetab Error Hierarchy
========================

This module defines the exception hierarchy for the whole interpreter.
All exceptions inherit from SpacetabError, so callers can stop any
program failure with a single except clause, while still being able to
tell fault kinds apart by type.

Exception Hierarchy
-------------------
SpacetabError (base)
├── ParseError (source-level faults)
│   ├── MixedLineError - a line holds both spaces and tabs
│   └── UnconsumedOperandError - two operand lines in a row
└── MachineError (runtime faults)
    ├── UnrecognizedInstructionError - opcode/operand pair not in the table
    ├── ValueConversionError - count does not fit the machine word
    ├── InvalidCodePointError - ASCII print of a non-character value
    ├── OutOfBoundsError - memory access outside a bounded store
    ├── DivisionByZeroError - opcode 6 with a zero operand
    └── ArithmeticOverflowError - result does not fit the machine word

Every error is fatal: the runner never retries or recovers. Messages
follow this format:
    filename:line: error: description
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A line in a program source, used for error reporting.

    Attributes:
        filename: Name of the source (or "<input>" for in-memory programs)
        line: Line number (1-indexed)
    """
    filename: str
    line: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}"


# =============================================================================
# Base Exception Class
# =============================================================================

class SpacetabError(Exception):
    """
    Base exception for all interpreter errors.

        try:
            run_source(program)
        except SpacetabError as e:
            print(e)

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location and hint.

        Example output:
            prog.st:7: error: line has 2 spaces and 1 tabs
            hint: a line may hold spaces or tabs, not both
        """
        if self.location:
            parts = [f"{self.location}: error: {self.message}"]
        else:
            parts = [f"error: {self.message}"]

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Parse Exceptions
# =============================================================================

class ParseError(SpacetabError):
    """Base class for faults found while reading program lines."""
    pass


class MixedLineError(ParseError):
    """
    A line contains both spaces and tabs.

    Each line must carry either an operand (spaces) or an opcode (tabs);
    there is no way to tell which one a mixed line means.
    """

    def __init__(
        self,
        spaces: int,
        tabs: int,
        line: str,
        location: Optional[SourceLocation] = None,
    ):
        self.spaces = spaces
        self.tabs = tabs
        self.line = line

        super().__init__(
            f"error parsing {line!r}: {spaces} spaces and {tabs} tabs is illegal",
            location=location,
            hint="a line may hold spaces or tabs, not both",
        )


class UnconsumedOperandError(ParseError):
    """
    An operand line arrived while another operand was still pending.

    Attributes:
        pending: The stale operand that was never consumed
        operand: The operand that tried to replace it
    """

    def __init__(
        self,
        pending: int,
        operand: int,
        location: Optional[SourceLocation] = None,
    ):
        self.pending = pending
        self.operand = operand

        super().__init__(
            f"operand {operand} follows unconsumed operand {pending}",
            location=location,
            hint="every operand line must be followed by an opcode line",
        )


# =============================================================================
# Machine Exceptions
# =============================================================================

class MachineError(SpacetabError):
    """Base class for faults raised while executing an instruction."""
    pass


class UnrecognizedInstructionError(MachineError):
    """The (opcode, operand-presence) pair is not in the dispatch table."""

    def __init__(
        self,
        opcode: int,
        operand: Optional[int],
        location: Optional[SourceLocation] = None,
    ):
        self.opcode = opcode
        self.operand = operand

        super().__init__(
            f"unrecognized action {opcode} (arg = {operand})",
            location=location,
        )


class ValueConversionError(MachineError):
    """A value cannot be represented in the type an operation requires."""

    def __init__(
        self,
        value: int,
        target: str,
        location: Optional[SourceLocation] = None,
    ):
        self.value = value
        self.target = target

        super().__init__(
            f"cannot convert {value} to {target}",
            location=location,
        )


class InvalidCodePointError(MachineError):
    """ASCII-mode print of a value that is not a Unicode scalar value."""

    def __init__(self, value: int, location: Optional[SourceLocation] = None):
        self.value = value

        super().__init__(
            f"can't make {value} into a char",
            location=location,
        )


class OutOfBoundsError(MachineError):
    """
    Memory access outside a bounded store.

    Only raised by FixedMemory; the default store grows on demand.
    """

    def __init__(
        self,
        address: int,
        capacity: int,
        location: Optional[SourceLocation] = None,
    ):
        self.address = address
        self.capacity = capacity

        super().__init__(
            f"address {address} is out of bounds for memory of {capacity} cells",
            location=location,
        )


class DivisionByZeroError(MachineError):
    """Opcode 6 with a zero divisor."""

    def __init__(self, dividend: Optional[int] = None, location: Optional[SourceLocation] = None):
        self.dividend = dividend

        super().__init__("attempt to divide by zero", location=location)


class ArithmeticOverflowError(MachineError):
    """An arithmetic result does not fit the 32-bit machine word."""

    def __init__(
        self,
        operation: str,
        result: int,
        location: Optional[SourceLocation] = None,
    ):
        self.operation = operation
        self.result = result

        super().__init__(
            f"attempt to {operation} with overflow (result {result})",
            location=location,
        )
