"""
spacetab - Interpreter Command-Line Interface
==============================================

Runs a whitespace-counted program. The program is read from standard
input unless a file is named.

Usage Examples
--------------
Run from standard input:
    $ spacetab < hello.st

Run a file:
    $ spacetab hello.st

Reproduce a bounded store of 16 cells:
    $ spacetab --memory-size 16 hello.st

Trace every instruction on stderr:
    $ spacetab -v hello.st
"""

import logging
from typing import BinaryIO, Optional

import click

from spacetab import __version__
from spacetab.cli.errors import handle_cli_exception
from spacetab.config import RunConfig
from spacetab.runner import run_stream


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "program",
    type=click.File("rb"),
    default="-",
)
@click.option(
    "--memory-size",
    type=click.IntRange(min=0),
    default=None,
    help="Use a bounded store of N cells instead of growable memory. "
         "Accesses beyond it fail with an out-of-bounds error.",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Trace each executed instruction on stderr",
)
@click.version_option(version=__version__, prog_name="spacetab")
def main(program: BinaryIO, memory_size: Optional[int], verbose: bool) -> None:
    """
    Run a spacetab program.

    PROGRAM is the source file to run (default: standard input).

    Each instruction is an optional operand line, whose value is its
    number of spaces, followed by an opcode line, whose value is its
    number of tabs. Other characters are ignored.

    \b
    Examples:
        spacetab < hello.st
        spacetab hello.st
        spacetab --memory-size 16 hello.st
    """
    config = RunConfig(
        memory_size=memory_size,
        verbose=verbose,
        filename=getattr(program, "name", "<stdin>"),
    )
    configure_logging(config.verbose)

    try:
        machine = config.create_machine()
        run_stream(program, machine, config.filename)
    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
