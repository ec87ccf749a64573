"""Base protocol for prompt engines."""

from typing import Any, Optional, Protocol

from linemenu.core.completion import CompletionFunc


class PromptEngine(Protocol):
    """What a menu needs from the terminal.

    Allows swapping the console backend, e.g. for scripted input in tests.
    """

    def push_completion_func(self, func: CompletionFunc) -> None:
        """Make ``func`` the active completion function."""
        ...

    def pop_completion_func(self) -> Optional[CompletionFunc]:
        """Restore the previously active completion function."""
        ...

    def ask_line(self, prompt: Any, default: Optional[str] = None) -> str:
        """Read one line; an empty answer yields ``default`` when given."""
        ...

    def say_line(self, value: Any) -> None:
        """Print styled text followed by a newline."""
        ...

    def render_plain(self, value: Any) -> str:
        """Render styled text as plain text."""
        ...
