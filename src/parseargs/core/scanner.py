"""
Command-line scanner.

Walks the argument vector once, left to right, and classifies every token as
a short option, a long option, an option value, a positional or the
end-of-options marker. Problems with the command line never stop the scan;
each one is recorded on the scan state and the scan moves on to the next token,
so a single call reports as many problems as possible.

After the scan the value counts of all given options are checked, and the
outcome is finalized:
- help given: everything except the help flag is dropped, diagnostics too
- errors found: all bindings are dropped, diagnostics are kept
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from parseargs.core.errors import ParserUsageError
from parseargs.core.models import HELP_UID, Option
from parseargs.core.outcome import OptionMap, ParseOutcome, PositionalMap
from parseargs.core.registry import Grammar

logger = logging.getLogger(__name__)

DOUBLE_DASH = "--"
HELP_HINT = "; use '--help' to see an overview of accepted options."


@dataclass
class ScanState:
    """Mutable state of one scan. Never shared between parse calls."""

    args: Sequence[str]
    index: int = 1
    positional_cursor: int = 0
    options_enabled: bool = True
    positionals: PositionalMap = field(default_factory=dict)
    options: OptionMap = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def token(self) -> str:
        return self.args[self.index]

    @property
    def done(self) -> bool:
        return self.index >= len(self.args)


def parse(grammar: Grammar, args: Sequence[str]) -> ParseOutcome:
    """
    Parse an argument vector against a grammar.

    Args:
        grammar: The declared positionals and options
        args: Raw arguments; element 0 is the program name and is not parsed

    Returns:
        ParseOutcome with bindings and diagnostics

    Raises:
        ParserUsageError: If args is empty (no program name)
    """
    if len(args) < 1:
        raise ParserUsageError(
            "Not enough arguments given; requires at least an executable as first argument."
        )

    state = ScanState(args=args)
    while not state.done:
        _step(grammar, state)

    _check_value_counts(grammar, state)

    logger.debug(
        "Parsed %d argument(s): %d error(s), %d warning(s)",
        len(args) - 1,
        len(state.errors),
        len(state.warnings),
    )
    return _finalize(grammar, state)


def _step(grammar: Grammar, state: ScanState) -> None:
    """Classify the token at the cursor, consume it and any values it takes."""
    token = state.token

    if not (state.options_enabled and token.startswith("-")):
        _bind_positional(grammar, state, token)
        state.index += 1
        return

    if len(token) == 1:
        state.errors.append("Missing character after '-'.")
        state.index += 1
        return

    if grammar.double_dash_enabled and token == DOUBLE_DASH:
        logger.debug("End of options at argument %d", state.index)
        state.options_enabled = False
        state.index += 1
        return

    if token[1] != "-" or (not grammar.double_dash_enabled and len(token) == 2):
        matched = _match_short(grammar, state, token)
    else:
        matched = _match_long(grammar, state, token)

    if not matched:
        hint = HELP_HINT if grammar.help_enabled else "."
        state.errors.append(f"Unknown option '{token}'{hint}")
    state.index += 1


def _match_short(grammar: Grammar, state: ScanState, token: str) -> bool:
    """
    Handle ``-x`` and ``-xVALUE``.

    Returns:
        False if no option has this short name
    """
    name = token[1]
    for option in grammar.options:
        if option.short_name != name:
            continue
        attached = token[2:] if len(token) > 2 else None
        _record(grammar, state, option, f"-{name}", attached)
        return True
    return False


def _match_long(grammar: Grammar, state: ScanState, token: str) -> bool:
    """
    Handle ``--name`` and ``--name=VALUE``.

    An option matches when its long name is a prefix of the text after the
    dashes and is followed by either nothing or ``=``.

    Returns:
        False if no option matches
    """
    rest = token[2:]
    for option in grammar.options:
        if not rest.startswith(option.long_name):
            continue
        attached = None
        if len(rest) > len(option.long_name):
            if rest[len(option.long_name)] != "=":
                continue
            attached = rest[len(option.long_name) + 1 :]
        _record(grammar, state, option, f"--{option.long_name}", attached)
        return True
    return False


def _record(
    grammar: Grammar,
    state: ScanState,
    option: Option,
    display: str,
    attached: str | None,
) -> None:
    """Bind one occurrence of an option plus its values."""
    if attached is not None:
        if option.is_flag:
            state.errors.append(
                f"Option '{display}' cannot accept values (is passed '{attached}')."
            )
            return
        if option.max_values > 1:
            state.errors.append(
                "Passing a value immediately after an option is only supported for "
                f"options with at most 1 value ('{display}' has at most {option.max_values})."
            )
            return

    if option.uid not in state.options:
        state.options[option.uid] = (option.short_name, option.long_name, [])
    values = state.options[option.uid][2]

    if attached is not None:
        values.append(attached)
    elif not option.is_flag:
        # Repeated occurrences share one budget of max_values
        values.extend(_consume_values(grammar, state, option.max_values - len(values)))


def _consume_values(grammar: Grammar, state: ScanState, limit: int) -> list[str]:
    """
    Take up to limit values from the tokens after the cursor.

    Stops at the first token that looks like an option while options are
    enabled. An enabled ``--`` met on the way turns options off, is skipped
    and does not count as a value. Leaves the cursor on the last token used.
    """
    values: list[str] = []
    next_index = state.index + 1
    while next_index < len(state.args) and len(values) < limit:
        token = state.args[next_index]
        if state.options_enabled and token.startswith("-"):
            if grammar.double_dash_enabled and token == DOUBLE_DASH:
                state.options_enabled = False
                next_index += 1
                continue
            break
        values.append(token)
        next_index += 1
    state.index = next_index - 1
    return values


def _bind_positional(grammar: Grammar, state: ScanState, token: str) -> None:
    positionals = grammar.positionals
    cursor = state.positional_cursor
    state.positional_cursor += 1

    if cursor >= len(positionals):
        state.warnings.append(f"Skipping positional '{token}' (index {cursor})...")
        return

    positional = positionals[cursor]
    state.positionals[positional.uid] = (positional.index, token)


def _check_value_counts(grammar: Grammar, state: ScanState) -> None:
    for option in grammar.options:
        if option.uid not in state.options:
            continue
        count = len(state.options[option.uid][2])
        if count < option.min_values:
            state.errors.append(
                f"Not enough values for '--{option.long_name}': "
                f"expected at least {option.min_values}, got {count}."
            )
        elif count > option.max_values:
            state.errors.append(
                f"Too many values for '--{option.long_name}': "
                f"expected at most {option.max_values}, got {count}."
            )


def _finalize(grammar: Grammar, state: ScanState) -> ParseOutcome:
    if grammar.help_enabled and HELP_UID in state.options:
        return ParseOutcome(
            options={HELP_UID: state.options[HELP_UID]},
            help_requested=True,
        )
    if state.errors:
        return ParseOutcome(warnings=state.warnings, errors=state.errors)
    return ParseOutcome(
        positionals=state.positionals,
        options=state.options,
        warnings=state.warnings,
    )
