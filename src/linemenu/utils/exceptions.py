"""Custom exceptions for linemenu.

- LinemenuError: Base exception for all linemenu errors
- EmptyMenuError: A menu was built without any items
- CompletionStackError: Completion provider stack misuse
- ConfigurationError: Invalid configuration values
"""


class LinemenuError(Exception):
    """Base exception for all linemenu errors.

    All linemenu-specific exceptions inherit from this class, allowing
    callers to catch all linemenu errors with a single except clause.
    """

    pass


class EmptyMenuError(LinemenuError, ValueError):
    """Raised when a menu is constructed from an empty item sequence."""

    pass


class CompletionStackError(LinemenuError):
    """Raised when popping a completion function from an empty stack."""

    pass


class ConfigurationError(LinemenuError):
    """Configuration related errors.

    Raised when configuration is invalid, such as:
    - Unknown label style
    - Malformed env overrides
    """

    pass
