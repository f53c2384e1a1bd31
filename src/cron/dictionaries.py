"""Symbolic weekday and month names.

Names are matched case-insensitively; both the three-letter abbreviation and the full English name
are accepted. Only the day-of-week and month fields have names.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from src.cron.schema import FieldKind

_WEEKDAY_NAMES: tuple[str, ...] = (
    "SUNDAY",
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
)

_MONTH_NAMES: tuple[str, ...] = (
    "JANUARY",
    "FEBRUARY",
    "MARCH",
    "APRIL",
    "MAY",
    "JUNE",
    "JULY",
    "AUGUST",
    "SEPTEMBER",
    "OCTOBER",
    "NOVEMBER",
    "DECEMBER",
)


def _with_abbreviations(names: tuple[str, ...], *, first: int) -> dict[str, int]:
    table: dict[str, int] = {}
    for idx, name in enumerate(names, start=first):
        table[name] = idx
        table[name[:3]] = idx
    return table


# Sunday is 0, matching the numeric day-of-week bounds.
WEEKDAY_NAME_TO_NUMBER: Mapping[str, int] = MappingProxyType(
    _with_abbreviations(_WEEKDAY_NAMES, first=0)
)
MONTH_NAME_TO_NUMBER: Mapping[str, int] = MappingProxyType(
    _with_abbreviations(_MONTH_NAMES, first=1)
)

_NAME_TABLES: Mapping[FieldKind, Mapping[str, int]] = MappingProxyType(
    {
        FieldKind.day_of_week: WEEKDAY_NAME_TO_NUMBER,
        FieldKind.month: MONTH_NAME_TO_NUMBER,
    }
)


def resolve_name(token: str, kind: FieldKind) -> int | None:
    """Resolve a symbolic name to its number.

    Returns:
        The number for a known name of the given field; `None` for an unknown name or for a field
        without symbolic names.
    """

    table = _NAME_TABLES.get(kind)
    if table is None:
        return None
    value = (token or "").strip()
    if not value.isascii():
        return None
    return table.get(value.upper())
