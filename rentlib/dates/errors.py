"""Errors raised by the date normalizer."""

from typing import Any


class InvalidDateFormat(ValueError):
    """Raised when a value cannot be read as a calendar date."""

    def __init__(self, value: Any, reason: str = ""):
        self.value = value
        message = f"Unsupported date format: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
