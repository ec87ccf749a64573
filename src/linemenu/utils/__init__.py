"""Utilities for linemenu."""

from linemenu.utils.exceptions import (
    CompletionStackError,
    ConfigurationError,
    EmptyMenuError,
    LinemenuError,
)

__all__ = [
    "CompletionStackError",
    "ConfigurationError",
    "EmptyMenuError",
    "LinemenuError",
]
