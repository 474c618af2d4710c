"""
Grammar declarations given on the parseargs command line.

Positionals:  ``uid[:name[:description]]``
Options:      ``uid:short:long[:min[:max[:hint[:description]]]]``

The description is the last field and may itself contain colons. An empty
short field declares a long-only option, e.g. ``verbose::verbose``.
"""

import logging

import typer

from parseargs.core.config import ParserConfig
from parseargs.parser import ArgParser

logger = logging.getLogger(__name__)


def _to_count(text: str, field_name: str, declaration: str) -> int:
    try:
        return int(text)
    except ValueError as e:
        raise typer.BadParameter(
            f"{field_name} must be a number in '{declaration}', got '{text}'"
        ) from e


def parse_positional_declaration(declaration: str) -> tuple[str, str, str]:
    """
    Split a ``--pos`` declaration into (uid, name, description).

    The name defaults to the uid.
    """
    uid, _, rest = declaration.partition(":")
    if not uid:
        raise typer.BadParameter(f"Positional declaration '{declaration}' has no uid")
    name, _, description = rest.partition(":")
    return uid, name or uid, description


def parse_option_declaration(declaration: str) -> tuple[str, str, str, int, int, str, str]:
    """
    Split an ``--opt`` declaration into the arguments of ArgParser.add_option.

    min and max default to 0 (a flag); max defaults to min when only min is
    given.
    """
    fields = declaration.split(":", 6)
    if len(fields) < 3 or not fields[0]:
        raise typer.BadParameter(
            f"Option declaration '{declaration}' needs at least uid:short:long"
        )
    uid, short_name, long_name = fields[0], fields[1], fields[2]
    min_values = _to_count(fields[3], "min", declaration) if len(fields) > 3 and fields[3] else 0
    if len(fields) > 4 and fields[4]:
        max_values = _to_count(fields[4], "max", declaration)
    else:
        max_values = min_values
    param_hint = fields[5] if len(fields) > 5 else ""
    description = fields[6] if len(fields) > 6 else ""
    return uid, short_name, long_name, min_values, max_values, param_hint, description


def build_parser(
    positionals: list[str],
    options: list[str],
    config: ParserConfig,
) -> ArgParser:
    """
    Build an ArgParser from command-line declarations.

    Raises:
        typer.BadParameter: If a declaration is malformed
        GrammarError: If the declarations conflict with each other
    """
    parser = ArgParser(config)
    for declaration in positionals:
        parser.add_positional(*parse_positional_declaration(declaration))
    for declaration in options:
        parser.add_option(*parse_option_declaration(declaration))
    logger.debug(
        "Built grammar with %d positional(s) and %d option(s)",
        len(parser.grammar.positionals),
        len(parser.grammar.options),
    )
    return parser
