"""Terminal prompt engine built on Rich and questionary."""

from typing import Any, Iterable, Optional

import questionary
from prompt_toolkit.completion import CompleteEvent, Completer
from prompt_toolkit.completion import Completion as PTCompletion
from prompt_toolkit.document import Document
from rich.console import Console
from rich.text import Text

from linemenu.core.completion import CompletionFunc
from linemenu.core.stylized import render_plain, to_stylized_text
from linemenu.utils.config import Config
from linemenu.utils.debug import debug_completion
from linemenu.utils.exceptions import CompletionStackError

# Custom style for questionary
custom_style = questionary.Style(
    [
        ("question", "fg:white bold"),
        ("answer", "fg:cyan"),
    ]
)


class StackCompleter(Completer):
    """Completer delegating to the engine's active completion function."""

    def __init__(self, engine: "ConsoleEngine"):
        self.engine = engine

    def get_completions(
        self, document: Document, complete_event: CompleteEvent
    ) -> Iterable[PTCompletion]:
        func = self.engine.current_completion_func()
        if func is None:
            return

        left = document.text_before_cursor
        unconsumed, completions = func(left, document.text_after_cursor)
        # Replace whatever part of the left text the function consumed
        start_position = -(len(left) - len(unconsumed))
        for completion in completions:
            # Finished completions end the word, like a shell does
            text = completion.replacement
            if completion.is_finished:
                text += " "
            yield PTCompletion(
                text,
                start_position=start_position,
                display=completion.display,
            )


class ConsoleEngine:
    """Prompt engine for interactive terminals.

    Output goes through a Rich console; input is read with questionary
    (prompt_toolkit), with tab completion from the completion stack.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        config: Optional[Config] = None,
    ):
        self.config = config or Config()
        self.console = console or Console(no_color=not self.config.color)
        self._completion_stack: list[CompletionFunc] = []
        self.completer = StackCompleter(self)

    def push_completion_func(self, func: CompletionFunc) -> None:
        self._completion_stack.append(func)
        debug_completion("push", depth=len(self._completion_stack))

    def pop_completion_func(self) -> Optional[CompletionFunc]:
        if not self._completion_stack:
            raise CompletionStackError("no completion function to pop")
        func = self._completion_stack.pop()
        debug_completion("pop", depth=len(self._completion_stack))
        return func

    def current_completion_func(self) -> Optional[CompletionFunc]:
        """The active completion function, if any."""
        return self._completion_stack[-1] if self._completion_stack else None

    def say_line(self, value: Any) -> None:
        self.console.print(to_stylized_text(value))

    def render_plain(self, value: Any) -> str:
        return render_plain(value)

    def _prompt_style(self, prompt: Text) -> questionary.Style:
        """questionary style showing the prompt in its own Rich style.

        The style of the first character is used for the whole prompt.
        """
        if not prompt.plain:
            return custom_style
        style = prompt.get_style_at_offset(self.console, 0)

        parts = []
        if not self.console.no_color:
            if style.color is not None and not style.color.is_default:
                parts.append(f"fg:{style.color.get_truecolor().hex}")
            if style.bgcolor is not None and not style.bgcolor.is_default:
                parts.append(f"bg:{style.bgcolor.get_truecolor().hex}")
        for attr in ("bold", "italic", "underline"):
            if getattr(style, attr):
                parts.append(attr)

        if not parts:
            return custom_style
        return questionary.Style(
            [
                ("question", " ".join(parts)),
                ("answer", "fg:cyan"),
            ]
        )

    def ask_line(self, prompt: Any, default: Optional[str] = None) -> str:
        """Read one line of input.

        Raises:
            KeyboardInterrupt: On Ctrl+C
            EOFError: On Ctrl+D or closed input
        """
        prompt = to_stylized_text(prompt)
        message = self.render_plain(prompt)
        if default:
            message = f"{message}[{default}] "

        answer = questionary.text(
            message,
            qmark="",
            style=self._prompt_style(prompt),
            completer=self.completer,
            complete_while_typing=False,
        ).unsafe_ask()

        if not answer and default is not None:
            return default
        return answer
