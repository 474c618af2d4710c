"""
Exceptions for parseargs.

Only caller bugs are raised: a malformed grammar, a lookup of a uid that was
never registered, conflicting help widths or an empty argument vector.
Problems with the user's command line are never raised; they are collected
as diagnostics on the ParseOutcome instead.
"""


class ParseArgsError(Exception):
    """Base class for all parseargs exceptions."""


class GrammarError(ParseArgsError):
    """Raised when a positional or option cannot be registered."""


class DuplicateUidError(GrammarError):
    """A positional or option with this uid already exists."""


class DuplicateShortNameError(GrammarError):
    """An option with this short name already exists."""


class DuplicateLongNameError(GrammarError):
    """An option with this long name already exists."""


class InvalidShortNameError(GrammarError):
    """A short name must be empty or a single character."""


class InvalidLongNameError(GrammarError):
    """A long name must not be empty."""


class InvalidRangeError(GrammarError):
    """The value range of an option is not a valid min/max pair."""


class UnknownUidError(GrammarError, KeyError):
    """No positional or option is registered under this uid."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class WrapWidthError(ParseArgsError, ValueError):
    """The indent width does not leave room on the line."""


class ParserUsageError(ParseArgsError):
    """The parser was called with an argument vector it cannot handle."""
