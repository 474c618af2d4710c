"""
parseargs - declarative command-line argument parsing.

Declare positionals and options, parse an argument vector into a result
dictionary with warnings and errors, and render word-wrapped help text.
"""

__version__ = "0.3.0"

# Re-export the public API for convenience
from parseargs.core import (
    HELP_UID,
    Grammar,
    GrammarError,
    HelpConfig,
    Option,
    ParseArgsError,
    ParseOutcome,
    ParserConfig,
    Positional,
    parse,
    render_help,
    render_usage,
    wrap,
)
from parseargs.parser import ArgParser

__all__ = [
    "ArgParser",
    "Grammar",
    "GrammarError",
    "HELP_UID",
    "HelpConfig",
    "Option",
    "ParseArgsError",
    "ParseOutcome",
    "ParserConfig",
    "Positional",
    "parse",
    "render_help",
    "render_usage",
    "wrap",
    "__version__",
]
