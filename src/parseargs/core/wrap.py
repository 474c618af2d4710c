"""
Word wrapping for help descriptions.

Text is written into a column that starts at ``indent_width`` and ends at
``line_width``. Every continuation line is prefixed with ``indent_width``
spaces. Widths are counted in characters (code points), so multi-byte text
is never split inside a character.

Separators between words:
- space: kept when there is room, dropped at a line break
- newline: forces a new indented line
- carriage return: dropped
- tab: pads to the next multiple of 4, dropped if that would overflow
"""

from collections.abc import Iterator

from parseargs.core.errors import WrapWidthError

SEPARATORS = frozenset(" \n\r\t")
TAB_STOP = 4


def iter_words(text: str) -> Iterator[tuple[str, str | None]]:
    """
    Split text into (word, separator) pairs in a single pass.

    A word may be empty when two separators follow each other. The last
    pair always has ``None`` as its separator to mark the end of the text.

    Example:
        >>> list(iter_words("a b\\n"))
        [('a', ' '), ('b', '\\n'), ('', None)]
    """
    start = 0
    for i, char in enumerate(text):
        if char in SEPARATORS:
            yield text[start:i], char
            start = i + 1
    yield text[start:], None


def wrap(text: str, column: int, indent_width: int, line_width: int) -> tuple[str, int]:
    """
    Wrap text so that no line grows past line_width columns.

    Args:
        text: The text to wrap
        column: Column the cursor is at when the text starts
        indent_width: Width of the indent on every continuation line
        line_width: Total width of a line, indent included

    Returns:
        Tuple of (wrapped text, column the cursor ends at)

    Raises:
        WrapWidthError: If indent_width does not leave room on the line
    """
    if indent_width < 0 or line_width < 0:
        raise WrapWidthError(
            f"Widths cannot be negative: indent {indent_width}, line {line_width}"
        )
    if indent_width >= line_width:
        raise WrapWidthError(
            "Cannot have an indent width larger than or equal to a line width: "
            f"{indent_width} >= {line_width}"
        )

    line_break = "\n" + " " * indent_width
    out: list[str] = []

    for word, separator in iter_words(text):
        if word:
            if column != indent_width and column + len(word) + 1 >= line_width:
                out.append(line_break)
                column = indent_width
            for char in word:
                # Words longer than the column are hard-split
                if column >= line_width:
                    out.append(line_break)
                    column = indent_width
                out.append(char)
                column += 1

        if separator == " ":
            if column + 2 < line_width:
                out.append(" ")
                column += 1
        elif separator == "\n":
            out.append(line_break)
            column = indent_width
        elif separator == "\t":
            target = column - column % TAB_STOP + TAB_STOP
            if target + 1 < line_width:
                out.append(" " * (target - column))
                column = target
        elif separator is None:
            break

    return "".join(out), column
