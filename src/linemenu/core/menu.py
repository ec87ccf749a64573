"""Menu configuration.

A ``Menu`` is an immutable value: every ``with_*`` method returns a new
menu and leaves the original untouched, so a menu can be shared between
prompts and tweaked per prompt.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

from rich.text import Text

from linemenu.core.choice import Choice
from linemenu.core.labels import numbered
from linemenu.core.matching import default_from_choice
from linemenu.core.stylized import to_stylized_text
from linemenu.utils.constants import DEFAULT_ITEM_SUFFIX
from linemenu.utils.exceptions import EmptyMenuError

T = TypeVar("T")

# (menu, label -> item map, raw answer) -> Choice
FromChoice = Callable[["Menu[T]", dict[str, T], str], Choice]


@dataclass(frozen=True)
class Menu(Generic[T]):
    """A menu containing items of type ``T``.

    Attributes:
        items: Menu items in display order (never empty)
        banner: Printed before the menu items
        prefix: Maps a 1-based item position to the item's label
        suffix: Printed after an item's label
        before_prompt: Printed right before the prompt
        from_choice: Translates the user's answer into a Choice
    """

    items: tuple[T, ...]
    banner: Optional[Text] = None
    prefix: Callable[[int], Text] = numbered
    suffix: Text = field(default_factory=lambda: Text(DEFAULT_ITEM_SUFFIX))
    before_prompt: Optional[Text] = None
    from_choice: FromChoice = default_from_choice

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))
        if not self.items:
            raise EmptyMenuError("a menu needs at least one item")

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def with_banner(self, banner: Any) -> "Menu[T]":
        """Change the banner printed just before the menu items."""
        return replace(self, banner=to_stylized_text(banner))

    def with_prefix(self, prefix: Callable[[int], Text]) -> "Menu[T]":
        """Change the label function.

        Labels should be unique once trimmed, since the user can type a
        label to pick its item.
        """
        return replace(self, prefix=prefix)

    def with_suffix(self, suffix: Any) -> "Menu[T]":
        """Change the text displayed between an item's label and the item."""
        return replace(self, suffix=to_stylized_text(suffix))

    def with_before_prompt(self, text: Any) -> "Menu[T]":
        """Change the text printed between the items and the prompt."""
        return replace(self, before_prompt=to_stylized_text(text))

    def with_from_choice(self, from_choice: FromChoice) -> "Menu[T]":
        """Change the function turning the user's answer into a Choice."""
        return replace(self, from_choice=from_choice)


def menu(items: Iterable[T]) -> Menu[T]:
    """Create a menu from a non-empty sequence of items.

    Raises:
        EmptyMenuError: If ``items`` is empty
    """
    return Menu(items=tuple(items))
