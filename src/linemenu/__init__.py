"""linemenu - Numbered selection menus for line-based terminal prompts."""

from importlib.metadata import version

__version__ = version("linemenu")

from linemenu.cli.ui import ConsoleEngine, PromptEngine
from linemenu.core import (
    Choice,
    Completion,
    Match,
    Menu,
    Other,
    ask_with_menu,
    ask_with_menu_repeatedly,
    default_comp_func,
    default_from_choice,
    lettered,
    match_on_prefix,
    menu,
    numbered,
    roman,
)

__all__ = [
    "Choice",
    "Completion",
    "ConsoleEngine",
    "Match",
    "Menu",
    "Other",
    "PromptEngine",
    "ask_with_menu",
    "ask_with_menu_repeatedly",
    "default_comp_func",
    "default_from_choice",
    "lettered",
    "match_on_prefix",
    "menu",
    "numbered",
    "roman",
]
