"""
CLI Error Handling
==================

Provides consistent error messages and exit codes for the CLI tools.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from scriptlex.errors import ConfigError, ScriptLexError


class ExitCode(IntEnum):
    """Standard exit codes for CLI tools."""
    SUCCESS = 0
    LEX_ERROR = 1        # ILLEGAL token in strict mode
    INVALID_ARGS = 2     # Invalid arguments, configuration or missing files
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception on stderr and exit with the matching code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always
    """
    if isinstance(error, ConfigError):
        click.echo(str(error), err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, ScriptLexError):
        # Already formatted with the "error:" prefix
        click.echo(str(error), err=True)
        sys.exit(ExitCode.LEX_ERROR)

    elif isinstance(error, (FileNotFoundError, PermissionError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
