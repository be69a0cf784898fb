"""Custom exceptions for mcli.

Both exceptions are terminal for a CLI invocation: the command layer reports
the message and exits non-zero.

    - ConfigurationError: config file could not be loaded or saved
    - InvalidArgumentError: wrong argument count or a field failed validation

Usage:
    from mcli.exceptions import ConfigurationError, InvalidArgumentError
"""

from __future__ import annotations

__all__ = [
    "ConfigurationError",
    "InvalidArgumentError",
    "McliError",
]


class McliError(Exception):
    """Base class for all mcli errors."""


class ConfigurationError(McliError):
    """Raised when the config file cannot be read, parsed, or written.

    Attributes:
        path: Config file involved in the failure, if known.
    """

    def __init__(self, message: str, *, path: object | None = None) -> None:
        super().__init__(message)
        self.path = path


class InvalidArgumentError(McliError, ValueError):
    """Raised for a bad command-line argument.

    Covers both argument-count errors and per-field validation failures.
    The message always quotes the offending value where there is one.

    Attributes:
        value: The rejected value, or None for argument-count errors.
    """

    def __init__(self, message: str, *, value: str | None = None) -> None:
        super().__init__(message)
        self.value = value
