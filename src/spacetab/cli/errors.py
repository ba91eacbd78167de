"""
Unified CLI Error Handling
==========================

Maps exceptions to messages on stderr and process exit codes.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from spacetab.errors import SpacetabError


class ExitCode(IntEnum):
    """Exit codes for the interpreter."""
    SUCCESS = 0
    PROGRAM_ERROR = 1    # Parse, decode, assembly, or execution fault
    INVALID_ARGS = 2     # Invalid arguments or missing files
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception and exit with the matching exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always
    """
    if isinstance(error, SpacetabError):
        # Messages already carry the "error:" prefix
        click.echo(str(error), err=True)
        sys.exit(ExitCode.PROGRAM_ERROR)

    elif isinstance(error, (click.BadParameter, FileNotFoundError, PermissionError)):
        click.echo(f"error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, UnicodeDecodeError):
        click.echo(f"error: cannot decode program text: {error}", err=True)
        sys.exit(ExitCode.PROGRAM_ERROR)

    else:
        click.echo(f"internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
