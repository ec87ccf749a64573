"""Label functions mapping a 1-based item position to its label."""

from rich.text import Text

from linemenu.utils.constants import LABEL_WIDTH

_ROMAN_NUMERALS = [
    (1000, "m"),
    (900, "cm"),
    (500, "d"),
    (400, "cd"),
    (100, "c"),
    (90, "xc"),
    (50, "l"),
    (40, "xl"),
    (10, "x"),
    (9, "ix"),
    (5, "v"),
    (4, "iv"),
    (1, "i"),
]


def _check_position(position: int) -> None:
    if position < 1:
        raise ValueError(f"menu positions start at 1, got {position}")


def numbered(position: int) -> Text:
    """Default label: the position right-aligned to two digits (" 1", "10")."""
    return Text(f"{position:{LABEL_WIDTH}d}")


def lettered(position: int) -> Text:
    """Label items a, b, ..., z, aa, ab, ... (bijective base 26)."""
    _check_position(position)
    letters = []
    while position > 0:
        position, rem = divmod(position - 1, 26)
        letters.append(chr(ord("a") + rem))
    return Text("".join(reversed(letters)).rjust(LABEL_WIDTH))


def roman(position: int) -> Text:
    """Label items with lowercase roman numerals (" i", "ii", "iv")."""
    _check_position(position)
    parts = []
    for value, numeral in _ROMAN_NUMERALS:
        count, position = divmod(position, value)
        parts.append(numeral * count)
    return Text("".join(parts).rjust(LABEL_WIDTH))
