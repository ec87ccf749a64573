"""Tests for styled text conversion."""

from rich.text import Text

from linemenu.core.stylized import render_plain, to_stylized_text


class Fruit:
    def __init__(self, name):
        self.name = name

    def __stylized__(self):
        return Text(self.name.title(), style="green")


def test_text_is_returned_unchanged():
    text = Text("hello", style="bold")
    assert to_stylized_text(text) is text


def test_strings_are_not_parsed_as_markup():
    """Square brackets in items are shown literally."""
    assert render_plain("[bold]x[/bold]") == "[bold]x[/bold]"


def test_objects_can_provide_their_own_text():
    text = to_stylized_text(Fruit("kiwi"))
    assert text.plain == "Kiwi"
    assert str(text.style) == "green"


def test_other_values_use_str():
    assert render_plain(42) == "42"
    assert render_plain(None) == "None"


def test_render_plain_strips_styles():
    assert render_plain(Text.assemble(("a", "red"), " ", ("b", "blue"))) == "a b"
