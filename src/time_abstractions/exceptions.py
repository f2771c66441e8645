"""Custom exceptions for the time_abstractions package."""

from __future__ import annotations


class TimeAbstractionsError(Exception):
    """Base exception for all time_abstractions errors."""


class NullArgumentError(TimeAbstractionsError, TypeError):
    """Raised when a required argument or collaborator is ``None``."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"Argument '{argument}' must not be None")


class InvalidArgumentError(TimeAbstractionsError, ValueError):
    """Raised when an argument is present but carries an unusable value."""

    def __init__(self, argument: str, message: str) -> None:
        self.argument = argument
        super().__init__(f"Invalid argument '{argument}': {message}")
