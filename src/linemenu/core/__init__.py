"""Menu building, matching and prompting."""

from linemenu.core.choice import Choice, Match, Other
from linemenu.core.completion import Completion, CompletionFunc, default_comp_func
from linemenu.core.labels import lettered, numbered, roman
from linemenu.core.matching import default_from_choice, match_on_prefix
from linemenu.core.menu import FromChoice, Menu, menu
from linemenu.core.session import (
    ask_with_menu,
    ask_with_menu_repeatedly,
    completion_scope,
    render_menu,
)
from linemenu.core.stylized import render_plain, to_stylized_text

__all__ = [
    "Choice",
    "Completion",
    "CompletionFunc",
    "FromChoice",
    "Match",
    "Menu",
    "Other",
    "ask_with_menu",
    "ask_with_menu_repeatedly",
    "completion_scope",
    "default_comp_func",
    "default_from_choice",
    "lettered",
    "match_on_prefix",
    "menu",
    "numbered",
    "render_menu",
    "render_plain",
    "roman",
    "to_stylized_text",
]
