"""
spacetab - Whitespace-Counting Virtual Machine
==============================================

This package implements an interpreter for a small esoteric language in
which each instruction is encoded by counting whitespace: an operand is
the number of spaces on a line, an opcode the number of tabs on the
next one. Every other character is filler.

Main Components
---------------
- **parser**: classifies a line as operand, opcode, or blank
- **assembler**: pairs an operand with the opcode that follows it
- **machine**: single-cursor machine executing the instructions
- **runner**: drives the three one line at a time

Quick Start
-----------
    >>> from spacetab import run_source
    >>> _ = run_source(" \\n\\t\\n\\t\\t\\t\\t\\t\\t\\t\\t\\t\\n")
    1

Or from the command line:
    $ spacetab < program.st
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from spacetab.errors import (
    SpacetabError,
    SourceLocation,
    ParseError,
    MixedLineError,
    UnconsumedOperandError,
    MachineError,
    UnrecognizedInstructionError,
    ValueConversionError,
    InvalidCodePointError,
    OutOfBoundsError,
    DivisionByZeroError,
    ArithmeticOverflowError,
)
from spacetab.parser import Token, TokenType, parse_line, iter_tokens
from spacetab.assembler import Assembler, Instruction
from spacetab.memory import SparseMemory, FixedMemory
from spacetab.machine import Machine, MachineState, DisplayMode
from spacetab.config import RunConfig
from spacetab.runner import run, run_source, run_stream

__all__ = [
    "__version__",
    # Errors
    "SpacetabError",
    "SourceLocation",
    "ParseError",
    "MixedLineError",
    "UnconsumedOperandError",
    "MachineError",
    "UnrecognizedInstructionError",
    "ValueConversionError",
    "InvalidCodePointError",
    "OutOfBoundsError",
    "DivisionByZeroError",
    "ArithmeticOverflowError",
    # Pipeline
    "Token",
    "TokenType",
    "parse_line",
    "iter_tokens",
    "Assembler",
    "Instruction",
    "SparseMemory",
    "FixedMemory",
    "Machine",
    "MachineState",
    "DisplayMode",
    "RunConfig",
    "run",
    "run_source",
    "run_stream",
]
