"""Stateless validation helpers used by the cron parsers.

Each helper either returns `None` or raises a specific `CronParseError` subclass.
"""

from __future__ import annotations

from collections.abc import Sequence

from src.cron.errors import EmptyFieldError, FormatError, RangeError, StepError
from src.cron.schema import FieldConstraints

MIN_PARTS = 6


def validate_format(parts: Sequence[str]) -> None:
    """Validate that a split expression has five fields plus at least one command token."""

    if len(parts) < MIN_PARTS:
        raise FormatError(
            "Invalid cron format. Expected at least 6 parts "
            f"(minute hour day_of_month month day_of_week command), got {len(parts)}",
            text=" ".join(parts),
        )


def validate_not_empty(text: str | None, field_name: str) -> None:
    if not text or not text.strip():
        raise EmptyFieldError(field_name)


def validate_in_range(value: int, constraints: FieldConstraints) -> None:
    """Validate that a value lies within the inclusive bounds of its field."""

    if not constraints.contains(value):
        raise RangeError(
            value,
            field_name=constraints.name,
            min_value=constraints.min,
            max_value=constraints.max,
        )


def validate_step(step: int, field_name: str) -> None:
    if step <= 0:
        raise StepError(step, field_name=field_name)
