"""
Usage and help rendering.

The help document is plain text laid out in two columns: labels on the left
and wrapped descriptions starting at ``indent_width``:

    Usage: prog [options] <input>

    Positionals:
      <input>           The file to read.

    Options:
      -h,--help         Shows this list of arguments, then quits.
"""

from parseargs.core.registry import Grammar
from parseargs.core.wrap import wrap

DEFAULT_INDENT_WIDTH = 20
DEFAULT_LINE_WIDTH = 80


def render_usage(grammar: Grammar, exec_name: str) -> str:
    """Build the one-line usage string (without trailing newline)."""
    parts = [f"Usage: {exec_name}"]
    if grammar.options:
        parts.append(" [options]")
    for positional in grammar.positionals:
        parts.append(f" <{positional.name}>")
    return "".join(parts)


def render_help(
    grammar: Grammar,
    exec_name: str,
    indent_width: int = DEFAULT_INDENT_WIDTH,
    line_width: int = DEFAULT_LINE_WIDTH,
) -> str:
    """
    Build the full help document, ready to be written to stdout.

    Args:
        grammar: The grammar to describe
        exec_name: Program name shown in the usage line
        indent_width: Column where descriptions start
        line_width: Total line width to wrap descriptions at

    Returns:
        The help text, terminated by a newline

    Raises:
        WrapWidthError: If indent_width >= line_width
    """
    lines = [render_usage(grammar, exec_name), "\n\n", "Positionals:\n"]
    for positional in grammar.positionals:
        label = f"  <{positional.name}>"
        lines.append(_render_entry(label, positional.description, indent_width, line_width))
    lines.append("\nOptions:\n")
    for option in grammar.options:
        label = f"  {option.label}"
        lines.append(_render_entry(label, option.description, indent_width, line_width))
    lines.append("\n")
    return "".join(lines)


def _render_entry(label: str, description: str, indent_width: int, line_width: int) -> str:
    # Labels that would touch the description column get a line of their own
    if len(label) + 2 >= indent_width:
        head = label + "\n" + " " * indent_width
    else:
        head = label + " " * (indent_width - len(label))
    body, _ = wrap(description, indent_width, indent_width, line_width)
    return head + body + "\n"
