"""
parseargs CLI - check and render commands.

Preview how a grammar declared with --pos/--opt parses a command line, or
render the help text it produces.
"""

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from parseargs.cli.declare import build_parser
from parseargs.cli.errors import ExitCode, print_error, print_grammar_error
from parseargs.core.config import HelpConfig, ParserConfig
from parseargs.core.errors import GrammarError
from parseargs.core.outcome import ParseOutcome
from parseargs.parser import ArgParser

console = Console()

POS_HELP = "Declare a positional as uid[:name[:description]] (repeatable)"
OPT_HELP = "Declare an option as uid:short:long[:min[:max[:hint[:description]]]] (repeatable)"


def _make_parser(
    positionals: list[str] | None,
    options: list[str] | None,
    double_dash: bool,
    with_help: bool,
    help_layout: HelpConfig | None = None,
) -> ArgParser:
    config = ParserConfig(
        double_dash=double_dash,
        help=with_help,
        help_layout=help_layout or HelpConfig(),
    )
    try:
        return build_parser(positionals or [], options or [], config)
    except GrammarError as e:
        print_grammar_error(e)
        raise typer.Exit(ExitCode.GENERAL_ERROR) from e


def _print_outcome(outcome: ParseOutcome) -> None:
    if outcome.positionals:
        table = Table(title="Positionals")
        table.add_column("UID", style="cyan")
        table.add_column("Index", justify="right")
        table.add_column("Value", style="green")
        for uid, (index, value) in sorted(outcome.positionals.items(), key=lambda kv: kv[1][0]):
            table.add_row(escape(uid), str(index), escape(repr(value)))
        console.print(table)

    if outcome.options:
        table = Table(title="Options")
        table.add_column("UID", style="cyan")
        table.add_column("Names")
        table.add_column("Values", style="green")
        for uid, (short_name, long_name, values) in outcome.options.items():
            names = f"-{short_name}, --{long_name}" if short_name else f"--{long_name}"
            shown = "[dim](no values)[/dim]"
            if values:
                shown = escape(", ".join(repr(v) for v in values))
            table.add_row(escape(uid), escape(names), shown)
        console.print(table)

    if not outcome.positionals and not outcome.options and not outcome.has_errors:
        console.print("[dim]Nothing bound.[/dim]")

    for warning in outcome.warnings:
        console.print(f"[yellow]Warning:[/yellow] {escape(warning)}", highlight=False)
    for error in outcome.errors:
        console.print(f"[red]Error:[/red] {escape(error)}", highlight=False)


def check(
    args: list[str] | None = typer.Argument(
        None,
        help="Command line to parse, given after '--' (program name excluded)",
    ),
    positionals: list[str] | None = typer.Option(None, "--pos", "-p", help=POS_HELP),
    options: list[str] | None = typer.Option(None, "--opt", "-o", help=OPT_HELP),
    double_dash: bool = typer.Option(
        False,
        "--double-dash",
        help="Treat a bare '--' inside the previewed command line as end of options",
    ),
    with_help: bool = typer.Option(
        False,
        "--with-help",
        help="Register the reserved -h/--help flag",
    ),
    prog: str = typer.Option("prog", "--prog", help="Program name used in help output"),
    strict: bool = typer.Option(False, "--strict", help="Treat warnings as errors"),
) -> None:
    """
    Parse a command line against a declared grammar and show the result.

    Exits with 2 when the command line has errors (or warnings with --strict).

    Examples:
        parseargs check -p input -o out:o:output:1:1 -- data.txt -o result.txt
        parseargs check -o v:v:verbose --with-help -- --help
    """
    parser = _make_parser(positionals, options, double_dash, with_help)
    outcome = parser.parse([prog, *(args or [])])

    if outcome.has_help_requested:
        typer.echo(parser.help(prog), nl=False)
        raise typer.Exit(ExitCode.SUCCESS)

    _print_outcome(outcome)

    if outcome.has_errors or (strict and outcome.has_warnings):
        raise typer.Exit(ExitCode.USER_ERROR)


def render(
    positionals: list[str] | None = typer.Option(None, "--pos", "-p", help=POS_HELP),
    options: list[str] | None = typer.Option(None, "--opt", "-o", help=OPT_HELP),
    with_help: bool = typer.Option(
        False,
        "--with-help",
        help="Register the reserved -h/--help flag",
    ),
    prog: str = typer.Option("prog", "--prog", help="Program name used in the usage line"),
    indent: int = typer.Option(20, "--indent", help="Column where descriptions start"),
    width: int = typer.Option(80, "--width", help="Total line width"),
    usage_only: bool = typer.Option(False, "--usage", help="Only print the usage line"),
) -> None:
    """
    Render the usage line and help text of a declared grammar.

    Examples:
        parseargs render -p input:file:"The file to read." --with-help
        parseargs render -o out:o:output:1:1:"<path>" --usage
    """
    try:
        layout = HelpConfig(indent_width=indent, line_width=width)
    except ValueError as e:
        print_error(
            "Invalid help layout",
            reason=f"--indent {indent} must be non-negative and smaller than --width {width}",
        )
        raise typer.Exit(ExitCode.GENERAL_ERROR) from e

    parser = _make_parser(positionals, options, False, with_help, layout)
    if usage_only:
        typer.echo(parser.usage(prog))
    else:
        typer.echo(parser.help(prog), nl=False)
