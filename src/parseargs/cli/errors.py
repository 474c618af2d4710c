"""
Standardized error handling and exit codes for the parseargs CLI.

This module provides consistent error messaging with actionable guidance
and standardized exit codes across all CLI commands.
"""

from enum import IntEnum

from rich.console import Console
from rich.markup import escape

console = Console(stderr=True)


class ExitCode(IntEnum):
    """Standard exit codes for parseargs CLI operations."""

    SUCCESS = 0
    """Operation completed successfully."""

    GENERAL_ERROR = 1
    """Generic error, e.g. an invalid grammar declaration."""

    USER_ERROR = 2
    """The previewed command line has errors (or warnings under --strict)."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it

    Example:
        >>> print_error(
        ...     "Invalid grammar",
        ...     reason="An option with long name 'out' already exists.",
        ...     solution="Give every --opt a distinct long name",
        ... )
    """
    console.print(f"[red]Error:[/red] {escape(problem)}", highlight=False)

    if reason:
        console.print(f"[dim]{escape(reason)}[/dim]", highlight=False)

    if solution:
        console.print(f"[cyan]→ Try:[/cyan] {solution}", highlight=False)


def print_grammar_error(error: Exception) -> None:
    """Print error when the declared grammar is rejected."""
    print_error(
        "Invalid grammar",
        reason=str(error),
        solution="parseargs check --help  # for the --pos/--opt syntax",
    )
