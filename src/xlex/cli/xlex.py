"""
xlex - Token Listing Command-Line Interface
===========================================

Runs the lexer over an X source file and prints one row per token:

    program    left: 0       right: 6       line: 1       PROGRAM
    {          left: 8       right: 8       line: 1       LEFT_BRACE

The line column is the line the source reader is on when the token is
printed.

Usage Examples
--------------
List tokens:
    $ xlex program.x

Prompt for the file name (resolved against --base-dir):
    $ xlex
    Enter fileName: program.x

Echo each source line as it is read:
    $ xlex --listing program.x

Stamp tokens with the line they start on:
    $ xlex --start-line program.x
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from xlex import __version__
from xlex.cli.errors import ExitCode, handle_cli_exception
from xlex.config import LexerOptions
from xlex.lexer import Lexer, Token

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def format_token(token: Token, line: int) -> str:
    """Format one row of the token listing."""
    return (
        f"{token.text:<10} left: {token.left_position:<7} "
        f"right: {token.right_position:<7} line: {line:<7} {token.kind.name}"
    )


def echo_source_line(number: int, text: str) -> None:
    click.echo(f"{number}: {text}")


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(path_type=Path),
)
@click.option(
    "-d", "--base-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory a prompted file name is resolved against",
)
@click.option(
    "--start-line",
    is_flag=True,
    help="Stamp tokens with the line they start on",
)
@click.option(
    "-l", "--listing",
    is_flag=True,
    help="Echo each source line as it is read",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="xlex")
def main(
    input_file: Optional[Path],
    base_dir: Path,
    start_line: bool,
    listing: bool,
    verbose: bool,
) -> None:
    """
    List the tokens of an X source file.

    INPUT_FILE is the source file (.x). When omitted, the file name is read
    from standard input.

    \b
    Examples:
        xlex program.x               # List tokens
        xlex --listing program.x     # Also echo source lines
        xlex -d samples              # Prompt, resolve under samples/
    """
    setup_logging(verbose)

    if input_file is None:
        name = click.prompt("Enter fileName", type=str)
        input_file = base_dir / name

    options = LexerOptions.from_env()
    if start_line:
        options.stamp_start_line = True

    try:
        lexer = Lexer.from_file(
            input_file,
            options=options,
            on_line=echo_source_line if listing else None,
        )
    except Exception as e:
        logger.debug(f"Cannot open {input_file}: {e}")
        handle_cli_exception(e, verbose)

    try:
        with lexer:
            for token in lexer.tokenize():
                click.echo(format_token(token, lexer.source.line))
    except Exception as e:
        handle_cli_exception(e, verbose)

    if lexer.diagnostics:
        sys.exit(ExitCode.LEX_ERROR)


if __name__ == "__main__":
    main()
