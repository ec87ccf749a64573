"""Result of resolving user input against a menu."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Match(Generic[T]):
    """User picked a menu item."""

    item: T


@dataclass(frozen=True)
class Other:
    """User entered text that doesn't match an item.

    ``text`` is the raw answer, surrounding whitespace included.
    """

    text: str


Choice = Union[Match[T], Other]
