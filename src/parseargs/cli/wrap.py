"""
parseargs CLI - wrap command.

Runs the help-text word wrapper on arbitrary text, useful for checking how a
description will be laid out.
"""

import sys

import typer

from parseargs.cli.errors import ExitCode, print_error
from parseargs.core.errors import WrapWidthError
from parseargs.core.wrap import wrap as wrap_text


def wrap(
    text: str | None = typer.Argument(
        None,
        help="Text to wrap; read from stdin when omitted",
    ),
    indent: int = typer.Option(20, "--indent", help="Indent of continuation lines"),
    width: int = typer.Option(80, "--width", help="Total line width"),
    column: int | None = typer.Option(
        None,
        "--column",
        help="Column the text starts at (defaults to the indent)",
    ),
) -> None:
    """
    Word-wrap text the way help descriptions are wrapped.

    Examples:
        parseargs wrap "A long description" --indent 4 --width 40
        cat notes.txt | parseargs wrap --indent 0
    """
    if text is None:
        text = sys.stdin.read()

    start = indent if column is None else column
    try:
        wrapped, _ = wrap_text(text, start, indent, width)
    except WrapWidthError as e:
        print_error("Invalid wrap widths", reason=str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR) from e

    typer.echo(" " * start + wrapped)
