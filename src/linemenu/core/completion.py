"""Tab completion of menu items."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from linemenu.core.matching import match_on_prefix
from linemenu.core.stylized import render_plain

if TYPE_CHECKING:
    from linemenu.core.menu import Menu


@dataclass(frozen=True)
class Completion:
    """A single completion candidate.

    Attributes:
        replacement: Text inserted when the candidate is chosen
        display: Text shown in the candidate list
        is_finished: Whether the completion is final (no further input expected)
    """

    replacement: str
    display: str
    is_finished: bool = True


# (left of cursor, right of cursor) -> (unconsumed left text, candidates)
CompletionFunc = Callable[[str, str], tuple[str, list[Completion]]]


def default_comp_func(menu: "Menu") -> CompletionFunc:
    """Completion function offering the menu items matching the typed text.

    The whole text left of the cursor is consumed, so a chosen candidate
    replaces everything typed so far.
    """

    def complete(left: str, right: str) -> tuple[str, list[Completion]]:
        items = menu.items if not left else match_on_prefix(menu, left)
        completions = []
        for item in items:
            text = render_plain(item)
            completions.append(Completion(text, text, True))
        return "", completions

    return complete
