"""
Program Runner
==============

Drives the parse -> assemble -> execute pipeline one line at a time.

Each line is parsed, fed to the assembler and, if it completes an
instruction, executed before the next line is read. The first error
stops the run; output already written is kept.
"""

import logging
from typing import IO, Iterable, Iterator, Optional, Union

from spacetab.assembler import Assembler
from spacetab.machine import Machine
from spacetab.parser import DEFAULT_FILENAME, parse_line


logger = logging.getLogger(__name__)


def run(
    lines: Iterable[str],
    machine: Optional[Machine] = None,
    filename: str = DEFAULT_FILENAME,
) -> Machine:
    """
    Run a program given as an iterable of lines.

    Args:
        lines: Program lines, with or without trailing newlines
        machine: Machine to run on (default: a fresh Machine)
        filename: Source name used in error messages

    Returns:
        The machine, in its final state

    Raises:
        SpacetabError: The first parse, assembly, or execution fault
    """
    if machine is None:
        machine = Machine()
    assembler = Assembler()

    for line_number, line in enumerate(lines, start=1):
        instruction = assembler.feed(parse_line(line, line_number, filename))
        if instruction is not None:
            machine.execute(instruction)

    assembler.finish()
    logger.debug(f"{filename}: executed {machine.executed} instructions")
    return machine


def run_source(
    source: str,
    machine: Optional[Machine] = None,
    filename: str = DEFAULT_FILENAME,
) -> Machine:
    """
    Run a whole program held in a string.

    Only a line feed ends a line; any other control character is filler.
    """
    lines = source.split("\n")
    if lines[-1] == "":
        lines.pop()
    return run(lines, machine, filename)


def run_stream(
    stream: IO,
    machine: Optional[Machine] = None,
    filename: Optional[str] = None,
) -> Machine:
    """
    Run a program read line by line from a stream.

    Binary streams are split on line feeds only and each line is decoded as
    UTF-8 just before it is parsed, so a bad byte stops the run at its
    own line. Text streams are used as given.

    Raises:
        UnicodeDecodeError: If a line of a binary stream is not UTF-8
    """
    if filename is None:
        filename = getattr(stream, "name", DEFAULT_FILENAME)
    return run(decode_lines(stream), machine, str(filename))


def decode_lines(lines: Iterable[Union[str, bytes]]) -> Iterator[str]:
    """Yield each line as text, decoding bytes lines one at a time."""
    for line in lines:
        if isinstance(line, bytes):
            line = line.decode("utf-8")
        yield line
