"""
Core parsing engine.

Public API:
    Models:
        - Positional, Option: declared grammar entries
        - HELP_UID, HELP_SHORT_NAME, HELP_LONG_NAME: reserved help flag names

    Registry:
        - Grammar: ordered positionals and options with uniqueness checks

    Parsing:
        - parse: scan an argument vector against a grammar
        - ParseOutcome: bindings, warnings and errors of one parse

    Rendering:
        - wrap, iter_words: width-aware word wrapping
        - render_usage, render_help: usage line and help document

    Configuration:
        - HelpConfig, ParserConfig
"""

from parseargs.core.config import HelpConfig, ParserConfig
from parseargs.core.errors import (
    DuplicateLongNameError,
    DuplicateShortNameError,
    DuplicateUidError,
    GrammarError,
    InvalidLongNameError,
    InvalidRangeError,
    InvalidShortNameError,
    ParseArgsError,
    ParserUsageError,
    UnknownUidError,
    WrapWidthError,
)
from parseargs.core.help import render_help, render_usage
from parseargs.core.models import (
    HELP_DESCRIPTION,
    HELP_LONG_NAME,
    HELP_SHORT_NAME,
    HELP_UID,
    Option,
    Positional,
)
from parseargs.core.outcome import ParseOutcome
from parseargs.core.registry import Grammar
from parseargs.core.scanner import parse
from parseargs.core.wrap import iter_words, wrap

__all__ = [
    # Models
    "Positional",
    "Option",
    "HELP_UID",
    "HELP_SHORT_NAME",
    "HELP_LONG_NAME",
    "HELP_DESCRIPTION",
    # Registry
    "Grammar",
    # Parsing
    "parse",
    "ParseOutcome",
    # Rendering
    "wrap",
    "iter_words",
    "render_usage",
    "render_help",
    # Configuration
    "HelpConfig",
    "ParserConfig",
    # Errors
    "ParseArgsError",
    "GrammarError",
    "DuplicateUidError",
    "DuplicateShortNameError",
    "DuplicateLongNameError",
    "InvalidShortNameError",
    "InvalidLongNameError",
    "InvalidRangeError",
    "UnknownUidError",
    "WrapWidthError",
    "ParserUsageError",
]
