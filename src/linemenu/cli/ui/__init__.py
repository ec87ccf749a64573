"""UI components for interactive prompting."""

from linemenu.cli.ui.base import PromptEngine
from linemenu.cli.ui.console import ConsoleEngine, StackCompleter

__all__ = [
    "ConsoleEngine",
    "PromptEngine",
    "StackCompleter",
]
