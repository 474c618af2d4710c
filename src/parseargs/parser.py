"""
ArgParser: one object to declare a grammar, parse with it and render help.

Example:
    >>> parser = ArgParser(ParserConfig(help=True))
    >>> _ = parser.add_positional("input", "input", "The file to read.")
    >>> _ = parser.add_option("out", "o", "output", 1, 1, "<path>", "Where to write.")
    >>> outcome = parser.parse(["prog", "data.txt", "-o", "result.txt"])
    >>> outcome.positional_value("input")
    'data.txt'
    >>> outcome.option_values("out")
    ['result.txt']
"""

from collections.abc import Sequence

from parseargs.core.config import ParserConfig
from parseargs.core.help import render_help, render_usage
from parseargs.core.models import Option, Positional
from parseargs.core.outcome import ParseOutcome
from parseargs.core.registry import Grammar
from parseargs.core.scanner import parse


class ArgParser:
    """
    Grammar plus the operations that use it.

    Declare everything before the first call to parse(); parse() itself does
    not change the parser and may be called any number of times.
    """

    def __init__(self, config: ParserConfig | None = None) -> None:
        self.config = config or ParserConfig()
        self.grammar = Grammar()
        if self.config.double_dash:
            self.grammar.enable_double_dash()
        if self.config.help:
            self.grammar.enable_help()

    def add_positional(self, uid: str, name: str, description: str = "") -> Positional:
        return self.grammar.add_positional(uid, name, description)

    def add_option(
        self,
        uid: str,
        short_name: str,
        long_name: str,
        min_values: int = 0,
        max_values: int = 0,
        param_hint: str = "",
        description: str = "",
    ) -> Option:
        return self.grammar.add_option(
            uid, short_name, long_name, min_values, max_values, param_hint, description
        )

    def add_double_dash(self) -> None:
        self.grammar.enable_double_dash()

    def add_help(self) -> Option:
        return self.grammar.enable_help()

    def index_of(self, uid: str) -> int:
        return self.grammar.index_of(uid)

    def name_of(self, uid: str) -> str:
        return self.grammar.name_of(uid)

    def short_name_of(self, uid: str) -> str:
        return self.grammar.short_name_of(uid)

    def long_name_of(self, uid: str) -> str:
        return self.grammar.long_name_of(uid)

    def parse(self, args: Sequence[str]) -> ParseOutcome:
        """Parse args (program name first) against the declared grammar."""
        return parse(self.grammar, args)

    def usage(self, exec_name: str) -> str:
        return render_usage(self.grammar, exec_name)

    def help(
        self,
        exec_name: str,
        indent_width: int | None = None,
        line_width: int | None = None,
    ) -> str:
        """
        Render the help document.

        Widths left as None come from the parser's HelpConfig.
        """
        layout = self.config.help_layout
        return render_help(
            self.grammar,
            exec_name,
            layout.indent_width if indent_width is None else indent_width,
            layout.line_width if line_width is None else line_width,
        )
