"""Tests for the terminal prompt engine."""

from io import StringIO

import pytest
from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document
from rich.console import Console
from rich.text import Text

from linemenu.cli.ui.console import ConsoleEngine
from linemenu.core import default_comp_func, menu
from linemenu.core.completion import Completion
from linemenu.utils.config import Config
from linemenu.utils.exceptions import CompletionStackError


@pytest.fixture
def engine(mock_linemenu_dir):
    console = Console(file=StringIO(), no_color=True, width=80)
    return ConsoleEngine(console=console, config=Config(mock_linemenu_dir))


def output(engine):
    return engine.console.file.getvalue()


class FakeQuestion:
    def __init__(self, answer):
        self.answer = answer

    def unsafe_ask(self):
        if isinstance(self.answer, BaseException):
            raise self.answer
        return self.answer


@pytest.fixture
def fake_text(monkeypatch):
    """Replace questionary.text, recording calls."""
    import questionary

    calls = []

    def install(answer):
        def text(message, **kwargs):
            calls.append((message, kwargs))
            return FakeQuestion(answer)

        monkeypatch.setattr(questionary, "text", text)
        return calls

    return install


def completions_for(engine, text):
    document = Document(text, cursor_position=len(text))
    return list(engine.completer.get_completions(document, CompleteEvent()))


class TestOutput:
    """Tests for printing."""

    def test_say_line_prints_text_and_newline(self, engine):
        engine.say_line(Text("hello"))
        assert output(engine) == "hello\n"

    def test_say_line_does_not_parse_markup(self, engine):
        engine.say_line("[red]literal[/red]")
        assert output(engine) == "[red]literal[/red]\n"

    def test_render_plain(self, engine):
        assert engine.render_plain(Text("x", style="bold")) == "x"

    def test_color_disabled_by_config(self, mock_linemenu_dir):
        config = Config(mock_linemenu_dir)
        config.color = False

        engine = ConsoleEngine(config=config)

        assert engine.console.no_color


class TestCompletionStack:
    """Tests for pushing and popping completion functions."""

    def test_push_and_pop(self, engine):
        func = default_comp_func(menu(["a"]))

        engine.push_completion_func(func)
        assert engine.current_completion_func() is func

        assert engine.pop_completion_func() is func
        assert engine.current_completion_func() is None

    def test_nested_functions_restore_outer(self, engine):
        outer = default_comp_func(menu(["a"]))
        inner = default_comp_func(menu(["b"]))

        engine.push_completion_func(outer)
        engine.push_completion_func(inner)
        engine.pop_completion_func()

        assert engine.current_completion_func() is outer

    def test_pop_empty_stack_raises(self, engine):
        with pytest.raises(CompletionStackError):
            engine.pop_completion_func()


class TestStackCompleter:
    """Tests for the prompt_toolkit completer."""

    def test_no_function_no_completions(self, engine):
        assert completions_for(engine, "ap") == []

    def test_replaces_consumed_text(self, engine):
        engine.push_completion_func(default_comp_func(menu(["apple", "apricot", "kiwi"])))

        completions = completions_for(engine, "ap")

        assert [c.text for c in completions] == ["apple ", "apricot "]
        assert [c.display_text for c in completions] == ["apple", "apricot"]
        assert all(c.start_position == -2 for c in completions)

    def test_unfinished_completion_has_no_trailing_space(self, engine):
        engine.push_completion_func(
            lambda left, right: ("", [Completion("src/", "src/", False)])
        )

        (completion,) = completions_for(engine, "s")

        assert completion.text == "src/"

    def test_keeps_unconsumed_text(self, engine):
        def last_word(left, right):
            head, _, word = left.rpartition(" ")
            keep = head + " " if head else ""
            return keep, [Completion("world", "world", True)]

        engine.push_completion_func(last_word)

        (completion,) = completions_for(engine, "hello wo")

        assert completion.text == "world "
        assert completion.start_position == -2


class TestAskLine:
    """Tests for reading input."""

    def test_returns_answer(self, engine, fake_text):
        calls = fake_text("blue")

        assert engine.ask_line(Text("Color? "), "1") == "blue"

        message, kwargs = calls[0]
        assert message == "Color? [1] "
        assert kwargs["completer"] is engine.completer

    def test_empty_answer_returns_default(self, engine, fake_text):
        fake_text("")
        assert engine.ask_line("Color? ", "1") == "1"

    def test_without_default(self, engine, fake_text):
        calls = fake_text("")

        assert engine.ask_line("Name? ") == ""
        assert calls[0][0] == "Name? "

    def test_interrupt_propagates(self, engine, fake_text):
        fake_text(KeyboardInterrupt())
        with pytest.raises(KeyboardInterrupt):
            engine.ask_line("? ", "1")

    def test_full_round_through_console(self, engine, fake_text):
        from linemenu.core import Match, ask_with_menu

        fake_text("gr")

        choice = ask_with_menu(engine, menu(["red", "green"]).with_banner("Colors"), "? ")

        assert choice == Match("green")
        assert output(engine) == "Colors\n\n   1) red\n   2) green\n\n"
        assert engine.current_completion_func() is None


class TestPromptStyle:
    """Tests for carrying the prompt's Rich style into questionary."""

    def test_plain_prompt_uses_default_style(self, engine, fake_text):
        from linemenu.cli.ui.console import custom_style

        calls = fake_text("x")

        engine.ask_line("Color? ", "1")

        assert calls[0][1]["style"] is custom_style

    def test_styled_prompt_keeps_its_style(self, engine, fake_text):
        calls = fake_text("x")

        engine.ask_line(Text("Color? ", style="bold underline"), "1")

        rules = dict(calls[0][1]["style"].style_rules)
        assert rules["question"] == "bold underline"
        assert calls[0][0] == "Color? [1] "

    def test_prompt_color_is_converted(self, mock_linemenu_dir, fake_text):
        console = Console(file=StringIO(), no_color=False, width=80)
        engine = ConsoleEngine(console=console, config=Config(mock_linemenu_dir))
        calls = fake_text("x")

        engine.ask_line(Text("Color? ", style="#ff0000 bold"))

        rules = dict(calls[0][1]["style"].style_rules)
        assert rules["question"] == "fg:#ff0000 bold"

    def test_no_color_console_drops_colors(self, engine, fake_text):
        from linemenu.cli.ui.console import custom_style

        calls = fake_text("x")

        engine.ask_line(Text("Color? ", style="red"))

        assert calls[0][1]["style"] is custom_style
