"""
parseargs CLI - Main application entry point.

This module sets up the Typer CLI application with all subcommands.
"""

import logging
import sys

import typer
from rich.console import Console

from parseargs import __version__
from parseargs.cli import check, wrap

# Create the main Typer app
app = typer.Typer(
    name="parseargs",
    help="Preview argument grammars, parse results and help layout",
    no_args_is_help=True,
    add_completion=False,
    context_settings={"help_option_names": ["--help", "-h"]},
)

console = Console()


def setup_logging(debug: bool = False) -> None:
    """
    Configure logging for parseargs commands.

    Args:
        debug: If True, log the scanner's DEBUG messages to stderr
    """
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
) -> None:
    """
    parseargs - declarative command-line argument parsing.

    Declare a grammar with --pos/--opt, then see how a command line parses
    against it or how its help text is laid out.

    Quick Start:
        parseargs check -p input -o out:o:output:1:1 -- data.txt -o result.txt
        parseargs render -p input:file:"The file to read." --with-help
        parseargs wrap "Some long description" --indent 4 --width 30
    """
    setup_logging(debug)
    ctx.obj = {"debug": debug}


@app.command()
def version() -> None:
    """Show the parseargs version."""
    console.print(f"parseargs version {__version__}")


app.command(name="check")(check.check)
app.command(name="render")(check.render)
app.command(name="wrap")(wrap.wrap)


def cli_main() -> None:
    """Main CLI entry point."""
    app()


__all__ = ["app", "cli_main"]
