"""Conversion of arbitrary values to styled text."""

from typing import Any

from rich.text import Text


def to_stylized_text(value: Any) -> Text:
    """Convert a value into styled text.

    ``Text`` is returned unchanged, objects with a ``__stylized__()`` method
    provide their own ``Text``, and everything else is converted with
    ``str()`` without markup parsing.
    """
    if isinstance(value, Text):
        return value
    stylize = getattr(value, "__stylized__", None)
    if stylize is not None:
        return stylize()
    if isinstance(value, str):
        return Text(value)
    return Text(str(value))


def render_plain(value: Any) -> str:
    """Render a value as plain text with all styling stripped."""
    return to_stylized_text(value).plain
