"""
Pytest configuration and shared fixtures.

Provides ready-made grammars and parsers used across the test suite.
"""

import pytest

from parseargs.core.registry import Grammar
from parseargs.parser import ArgParser

# ==============================================================================
# Grammar Fixtures
# ==============================================================================


@pytest.fixture
def empty_grammar() -> Grammar:
    """Provide a grammar without any declarations."""
    return Grammar()


@pytest.fixture
def flag_grammar() -> Grammar:
    """Provide a grammar with a single flag option (-o/--opt1)."""
    grammar = Grammar()
    grammar.add_option("opt1", "o", "opt1", 0, 0, "", "A test option.")
    return grammar


@pytest.fixture
def values_grammar() -> Grammar:
    """Provide a grammar with one option accepting 0 to 3 values (-o/--opt1)."""
    grammar = Grammar()
    grammar.add_option("opt1", "o", "opt1", 0, 3, "", "A test option.")
    return grammar


@pytest.fixture
def mixed_grammar() -> Grammar:
    """
    Provide a grammar with two positionals and two options.

    - pos1, pos2: positionals
    - opt1: -o/--opt1 with 0..3 values
    - opt2: --opt2 with exactly 4 values
    """
    grammar = Grammar()
    grammar.add_positional("pos1", "pos1", "A test positional.")
    grammar.add_positional("pos2", "pos2", "Another test positional.")
    grammar.add_option("opt1", "o", "opt1", 0, 3, "[<opt1>[ <opt2>[ <opt3>]]]", "A test option.")
    grammar.add_option(
        "opt2", "", "opt2", 4, 4, "<opt1> <opt2> <opt3> <opt4>", "Another test option."
    )
    return grammar


# ==============================================================================
# Parser Fixtures
# ==============================================================================


@pytest.fixture
def tool_parser() -> ArgParser:
    """
    Provide an ArgParser resembling a small file tool.

    Has help and double-dash enabled, one positional and three options.
    """
    parser = ArgParser()
    parser.add_help()
    parser.add_double_dash()
    parser.add_positional("input", "input", "The file to read.")
    parser.add_option("output", "o", "output", 1, 1, "<path>", "Where to write the result.")
    parser.add_option("verbose", "v", "verbose", 0, 0, "", "Print more.")
    parser.add_option("define", "D", "define", 1, 2, "<key> [<value>]", "Define a variable.")
    return parser
