"""
masic - BASIC Compiler Command-Line Interface
=============================================

Compiles a line-numbered BASIC program to Maker Forth.

Usage Examples
--------------
Print the translation:
    $ masic game.bas

Write it to a file:
    $ masic game.bas game.fs

Verbose mode:
    $ masic -v game.bas game.fs
"""

import logging
from pathlib import Path
from typing import Optional

import click

from masic import __version__
from masic.compiler import BasicCompiler
from masic.cli.errors import handle_cli_exception

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.argument(
    "output_file",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="masic")
def main(input_file: Path, output_file: Optional[Path], verbose: bool) -> None:
    """
    Compile BASIC source code to Maker Forth.

    INPUT_FILE is the BASIC program to compile. The Forth text is written
    to OUTPUT_FILE, or to standard output when no OUTPUT_FILE is given.
    Nothing is written if the program fails to compile.

    \b
    Examples:
        masic game.bas               # Print to stdout
        masic game.bas game.fs       # Write game.fs
    """
    setup_logging(verbose)

    try:
        if verbose:
            click.echo(f"Compiling {input_file}...", err=True)

        result = BasicCompiler().compile_file(str(input_file))

        if output_file is None:
            click.echo(result.output)
            return

        output_file.write_text(result.output, encoding="utf-8")
        logger.debug(f"Wrote {len(result.output)} characters to {output_file}")

        if verbose:
            click.echo(f"Compiled {input_file} -> {output_file}", err=True)

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
