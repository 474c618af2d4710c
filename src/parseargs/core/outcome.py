"""
ParseOutcome: what a single parse call found on the command line.

The outcome holds the bound positionals and options together with the
warnings and errors collected during the scan. The scanner builds it once
the scan is complete; every accessor returns a copy, so a returned outcome
cannot be changed from the outside.
"""

from rich.console import Console

# uid -> (declared index, raw value)
PositionalMap = dict[str, tuple[int, str]]
# uid -> (short name, long name, raw values)
OptionMap = dict[str, tuple[str, str, list[str]]]

_stderr = Console(stderr=True, highlight=False)


class ParseOutcome:
    """
    Result of parsing an argument vector.

    If errors were found, no positional or option is bound. If the help flag
    was given, only the help flag is bound and there are no diagnostics.
    """

    def __init__(
        self,
        positionals: PositionalMap | None = None,
        options: OptionMap | None = None,
        warnings: list[str] | None = None,
        errors: list[str] | None = None,
        help_requested: bool = False,
    ) -> None:
        self._positionals: PositionalMap = dict(positionals or {})
        self._options: OptionMap = {
            uid: (short_name, long_name, list(values))
            for uid, (short_name, long_name, values) in (options or {}).items()
        }
        self._warnings: list[str] = list(warnings or [])
        self._errors: list[str] = list(errors or [])
        self._help_requested = help_requested

    def __repr__(self) -> str:
        return (
            f"ParseOutcome(positionals={self._positionals!r}, options={self._options!r}, "
            f"warnings={self._warnings!r}, errors={self._errors!r}, "
            f"help_requested={self._help_requested!r})"
        )

    @property
    def positionals(self) -> PositionalMap:
        """Copy of the bound positionals, keyed by uid."""
        return dict(self._positionals)

    @property
    def options(self) -> OptionMap:
        """Copy of the bound options, keyed by uid."""
        return {
            uid: (short_name, long_name, list(values))
            for uid, (short_name, long_name, values) in self._options.items()
        }

    @property
    def has_errors(self) -> bool:
        return bool(self._errors)

    @property
    def errors(self) -> list[str]:
        return list(self._errors)

    @property
    def has_warnings(self) -> bool:
        return bool(self._warnings)

    @property
    def warnings(self) -> list[str]:
        return list(self._warnings)

    @property
    def has_help_requested(self) -> bool:
        return self._help_requested

    def has_positional(self, uid: str) -> bool:
        return uid in self._positionals

    def positional_value(self, uid: str) -> str | None:
        """Raw value bound to the positional, or None if it was not given."""
        entry = self._positionals.get(uid)
        return entry[1] if entry is not None else None

    def positional_index(self, uid: str) -> int | None:
        """Declared index of the positional, or None if it was not given."""
        entry = self._positionals.get(uid)
        return entry[0] if entry is not None else None

    def has_option(self, uid: str) -> bool:
        return uid in self._options

    def option_values(self, uid: str) -> list[str] | None:
        """
        Values given to the option.

        Returns:
            The values in command-line order (empty for a flag), or None if
            the option was never given
        """
        entry = self._options.get(uid)
        return list(entry[2]) if entry is not None else None

    def print_errors(self, console: Console | None = None) -> None:
        """Print every error on its own line (stderr by default)."""
        out = console or _stderr
        for error in self._errors:
            out.print(error, markup=False, soft_wrap=True)

    def print_warnings(self, console: Console | None = None) -> None:
        """Print every warning on its own line (stderr by default)."""
        out = console or _stderr
        for warning in self._warnings:
            out.print(warning, markup=False, soft_wrap=True)
