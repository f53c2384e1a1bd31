"""Cron field constraints and the parsed expression schema (Pydantic models).

`ParsedExpression` is the contract between the cron parser and any renderer. Every instance is
validated on construction, so callers may rely on each field being a strictly ascending tuple of
in-range integers.
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, model_validator


class FieldKind(StrEnum):
    """The five positional cron fields."""

    minute = "minute"
    hour = "hour"
    day_of_month = "day_of_month"
    month = "month"
    day_of_week = "day_of_week"


class FieldConstraints(BaseModel):
    """Inclusive numeric bounds and display name of a single cron field."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: FieldKind
    min: int
    max: int
    name: str

    @model_validator(mode="after")
    def validate_bounds(self) -> FieldConstraints:
        """Validate that the bounds are well-formed (`min <= max`)."""

        if self.min > self.max:
            raise ValueError("min must be <= max")
        return self

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max


FIELD_ORDER: tuple[FieldKind, ...] = (
    FieldKind.minute,
    FieldKind.hour,
    FieldKind.day_of_month,
    FieldKind.month,
    FieldKind.day_of_week,
)

FIELD_CONSTRAINTS: Mapping[FieldKind, FieldConstraints] = MappingProxyType(
    {
        FieldKind.minute: FieldConstraints(kind=FieldKind.minute, min=0, max=59, name="minute"),
        FieldKind.hour: FieldConstraints(kind=FieldKind.hour, min=0, max=23, name="hour"),
        FieldKind.day_of_month: FieldConstraints(
            kind=FieldKind.day_of_month, min=1, max=31, name="day of month"
        ),
        FieldKind.month: FieldConstraints(kind=FieldKind.month, min=1, max=12, name="month"),
        FieldKind.day_of_week: FieldConstraints(
            kind=FieldKind.day_of_week, min=0, max=6, name="day of week"
        ),
    }
)


def constraints_for(kind: FieldKind) -> FieldConstraints:
    """Return the static constraints of a cron field."""

    return FIELD_CONSTRAINTS[kind]


class ParsedExpression(BaseModel):
    """A fully expanded cron expression."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    minute: tuple[int, ...]
    hour: tuple[int, ...]
    day_of_month: tuple[int, ...]
    month: tuple[int, ...]
    day_of_week: tuple[int, ...]
    command: str

    @model_validator(mode="after")
    def validate_fields(self) -> ParsedExpression:
        """Enforce the per-field invariants: non-empty, strictly ascending, within bounds."""

        for kind in FIELD_ORDER:
            values = self.values_for(kind)
            constraints = FIELD_CONSTRAINTS[kind]
            if not values:
                raise ValueError(f"{constraints.name} must contain at least one value")
            if any(a >= b for a, b in zip(values, values[1:])):
                raise ValueError(f"{constraints.name} values must be strictly ascending")
            if not (constraints.contains(values[0]) and constraints.contains(values[-1])):
                raise ValueError(
                    f"{constraints.name} values must be within "
                    f"[{constraints.min}, {constraints.max}]"
                )
        return self

    def values_for(self, kind: FieldKind) -> tuple[int, ...]:
        """Return the expanded values of a field by kind."""

        return getattr(self, kind.value)
