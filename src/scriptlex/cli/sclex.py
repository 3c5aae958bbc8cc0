"""
sclex - Token Printer Command-Line Interface
============================================

Feeds source text to the scanner and prints the resulting tokens.

Usage Examples
--------------
Tokenize a file:
    $ sclex program.src

Tokenize an inline string:
    $ sclex -e "let x = 5;"

Read from standard input:
    $ echo "fn(a) { a + 1 }" | sclex

JSON output, failing on illegal characters:
    $ sclex --format json --strict program.src
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from scriptlex import __version__
from scriptlex.config import OUTPUT_FORMATS, DriverConfig
from scriptlex.lexer import Lexer, Token, TokenType, check_tokens
from scriptlex.cli.errors import handle_cli_exception

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def format_tokens(tokens: list[Token], output_format: str) -> str:
    """Render tokens as tab-separated lines or as a JSON array."""
    if output_format == "json":
        return json.dumps(
            [{"kind": token.kind.name, "text": token.text} for token in tokens],
            indent=2,
        )
    return "\n".join(f"{token.kind.name}\t{token.text}" for token in tokens)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-e", "--expr",
    help="Tokenize this source string instead of a file",
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default=None,
    help="Output format (default: text, or $SCRIPTLEX_FORMAT)",
)
@click.option(
    "--no-eof",
    is_flag=True,
    help="Omit the trailing EOF token",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Exit with status 1 if an illegal character is found",
)
@click.option(
    "-v", "--verbose/--quiet",
    default=None,
    help="Verbose output (default: off, or $SCRIPTLEX_VERBOSE)",
)
@click.version_option(version=__version__, prog_name="sclex")
def main(
    input_file: Optional[Path],
    expr: Optional[str],
    output_format: Optional[str],
    no_eof: bool,
    strict: Optional[bool],
    verbose: Optional[bool],
) -> None:
    """
    Print the tokens of a scripting language source.

    INPUT_FILE is the source to scan. Use -e to pass the source on the
    command line; with neither, the source is read from standard input.

    \b
    Examples:
        sclex program.src            # One token per line
        sclex -e "let x = 5;"        # Inline source
        sclex -f json program.src    # JSON array of tokens
        sclex --strict program.src   # Fail on illegal characters
    """
    if input_file is not None and expr is not None:
        raise click.UsageError("give either INPUT_FILE or --expr, not both")

    try:
        config = DriverConfig.from_env()
    except Exception as e:
        handle_cli_exception(e)

    # Explicit flags win over the environment
    if output_format is not None:
        config.output_format = output_format.lower()
    if strict is not None:
        config.strict = strict
    if verbose is not None:
        config.verbose = verbose
    if no_eof:
        config.include_eof = False

    setup_logging(config.verbose)

    try:
        if expr is not None:
            source = expr
        elif input_file is not None:
            logger.debug("reading %s", input_file)
            source = input_file.read_text()
        else:
            source = sys.stdin.read()

        tokens = list(Lexer(source).tokenize())
        shown = [
            token for token in tokens
            if config.include_eof or token.kind is not TokenType.EOF
        ]
        if shown or config.output_format == "json":
            click.echo(format_tokens(shown, config.output_format))

        if config.verbose:
            illegal = sum(1 for token in tokens if token.kind is TokenType.ILLEGAL)
            click.echo(
                f"Scanned {len(source)} characters: "
                f"{len(tokens)} tokens, {illegal} illegal",
                err=True,
            )

        if config.strict:
            check_tokens(tokens)

    except Exception as e:
        handle_cli_exception(e, verbose=config.verbose)


if __name__ == "__main__":
    main()
