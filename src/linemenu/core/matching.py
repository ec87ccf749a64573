"""Resolution of user input against menu items.

The default resolver lets the user pick an item either by typing its
label (such as " 2" from the default numbering) or by typing any unique
prefix of the item's text. A unique prefix wins over a label, so a label
that is also a unique item prefix selects that item instead.
"""

from typing import TYPE_CHECKING, TypeVar

from linemenu.core.choice import Choice, Match, Other
from linemenu.core.stylized import render_plain
from linemenu.utils.debug import debug_match

if TYPE_CHECKING:
    from linemenu.core.menu import Menu

T = TypeVar("T")


def match_on_prefix(menu: "Menu[T]", query: str) -> list[T]:
    """Items whose plain text starts with ``query``, in display order.

    The comparison is exact and case-sensitive; an empty query matches
    every item.
    """
    return [item for item in menu.items if render_plain(item).startswith(query)]


def default_from_choice(menu: "Menu[T]", prefixes: dict[str, T], answer: str) -> Choice:
    """Default resolver: unique item prefix, then label, else ``Other``.

    Args:
        menu: The menu the answer was given for
        prefixes: Trimmed labels mapped to their items
        answer: Raw user input

    Returns:
        Match of the selected item, or Other carrying the untrimmed answer
    """
    clean = answer.strip()

    matches = match_on_prefix(menu, clean)
    if len(matches) == 1:
        debug_match("unique prefix", answer=clean)
        return Match(matches[0])

    if clean in prefixes:
        debug_match("label", answer=clean, candidates=len(matches))
        return Match(prefixes[clean])

    debug_match("no match", answer=answer, candidates=len(matches))
    return Other(answer)
