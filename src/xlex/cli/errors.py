"""
CLI Error Handling
==================

Provides consistent error handling and exit codes for the command-line tool.

Lexical errors never arrive here: the lexer logs them and the command exits
with LEX_ERROR once the listing is done.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

USAGE = "usage: xlex filename.x"


class ExitCode(IntEnum):
    """Standard exit codes for the CLI."""
    SUCCESS = 0
    LEX_ERROR = 1        # A lexical error stopped the scan
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
    if isinstance(error, (FileNotFoundError, IsADirectoryError, PermissionError)):
        # The source file could not be opened
        click.echo(USAGE, err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    click.echo(f"Internal error: {error}", err=True)
    if verbose:
        traceback.print_exc()
    sys.exit(ExitCode.INTERNAL_ERROR)
