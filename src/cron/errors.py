"""Typed cron parsing errors.

Every error is a `ValueError` subclass carrying the offending field name and raw text or value, so
a caller can print a one-line diagnostic without further context.
"""

from __future__ import annotations


class CronParseError(ValueError):
    """Base class for every cron parsing failure."""


class EmptyExpressionError(CronParseError):
    """Raised when the whole expression is empty or whitespace-only."""

    def __init__(self) -> None:
        super().__init__("Cron expression cannot be empty")


class FormatError(CronParseError):
    """Raised for malformed expression structure (part count, wildcard or range syntax)."""

    def __init__(self, message: str, *, text: str, field_name: str | None = None) -> None:
        self.text = text
        self.field_name = field_name
        super().__init__(message)


class EmptyFieldError(CronParseError):
    """Raised when a field, or one element of a field list, is blank."""

    def __init__(self, field_name: str, *, text: str = "") -> None:
        self.field_name = field_name
        self.text = text
        if text.strip():
            message = f"Field '{field_name}' contains an empty list element: {text!r}"
        else:
            message = f"Field '{field_name}' cannot be empty"
        super().__init__(message)


class InvalidValueError(CronParseError):
    """Raised when a token is neither an integer nor a known symbolic name."""

    def __init__(self, field_name: str, token: str) -> None:
        self.field_name = field_name
        self.token = token
        super().__init__(f"Invalid value for {field_name}: {token!r}")


class RangeError(CronParseError):
    """Raised when a value falls outside the inclusive bounds of its field."""

    def __init__(self, value: int, *, field_name: str, min_value: int, max_value: int) -> None:
        self.value = value
        self.field_name = field_name
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(
            f"Value {value} is out of range for {field_name}. Expected {min_value}-{max_value}"
        )


class RangeOrderError(CronParseError):
    """Raised when a range start is greater than its end."""

    def __init__(self, start: int, end: int, *, field_name: str) -> None:
        self.start = start
        self.end = end
        self.field_name = field_name
        super().__init__(
            f"Invalid range for {field_name}: start ({start}) is greater than end ({end})"
        )


class StepError(CronParseError):
    """Raised when a step value is zero or negative."""

    def __init__(self, step: int, *, field_name: str) -> None:
        self.step = step
        self.field_name = field_name
        super().__init__(f"Step value for {field_name} must be greater than 0, got {step}")
