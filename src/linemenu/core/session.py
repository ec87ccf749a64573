"""Prompting the user with a menu."""

from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Iterator, TypeVar

from rich.text import Text

from linemenu.core.choice import Choice, Match
from linemenu.core.completion import CompletionFunc, default_comp_func
from linemenu.core.menu import Menu
from linemenu.core.stylized import to_stylized_text
from linemenu.utils.constants import ITEM_INDENT
from linemenu.utils.debug import debug_menu

if TYPE_CHECKING:
    from linemenu.cli.ui.base import PromptEngine

T = TypeVar("T")


@contextmanager
def completion_scope(engine: "PromptEngine", func: CompletionFunc) -> Iterator[None]:
    """Install ``func`` as the engine's completion function for the block.

    The function is popped again however the block exits.
    """
    engine.push_completion_func(func)
    try:
        yield
    finally:
        engine.pop_completion_func()


def render_menu(engine: "PromptEngine", menu: Menu[T]) -> dict[str, T]:
    """Print the banner, the items and the before-prompt text.

    Returns:
        Trimmed plain labels mapped to their items. When two labels
        collide the later item wins.
    """
    if menu.banner is not None:
        engine.say_line(menu.banner + Text("\n"))

    prefixes: dict[str, T] = {}
    for position, item in enumerate(menu.items, start=1):
        label = menu.prefix(position)
        engine.say_line(
            Text.assemble(ITEM_INDENT, label, menu.suffix, to_stylized_text(item))
        )
        prefixes[engine.render_plain(label).strip()] = item

    if menu.before_prompt is not None:
        engine.say_line(Text("\n") + menu.before_prompt)
    else:
        engine.say_line(Text())

    debug_menu("rendered", items=len(menu), labels=len(prefixes))
    return prefixes


def ask_with_menu(engine: "PromptEngine", menu: Menu[T], prompt: Any) -> Choice:
    """Show the menu once and resolve the user's answer.

    The first item's label is offered as the default answer. Input that
    doesn't select an item comes back as ``Other``; use
    ``ask_with_menu_repeatedly`` to insist on an item.
    """
    with completion_scope(engine, default_comp_func(menu)):
        prefixes = render_menu(engine, menu)
        default = engine.render_plain(menu.prefix(1)).strip()
        answer = engine.ask_line(to_stylized_text(prompt), default)

    debug_menu("answer", answer=answer, items=len(menu))
    return menu.from_choice(menu, prefixes, answer)


def ask_with_menu_repeatedly(
    engine: "PromptEngine", menu: Menu[T], prompt: Any, error: Any
) -> T:
    """Like ``ask_with_menu`` but only accept menu items.

    Each answer that doesn't select an item redisplays the menu with
    ``error`` printed before the prompt. There is no retry limit; errors
    from the engine (such as EOFError) propagate.
    """
    current = menu
    while True:
        choice = ask_with_menu(engine, current, prompt)
        if isinstance(choice, Match):
            return choice.item
        debug_menu("no item selected, asking again", answer=choice.text)
        current = current.with_before_prompt(error)
