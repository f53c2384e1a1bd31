"""Single cron field parser.

Grammar, applied to the trimmed field text:
    - `a,b,c`   list; every element is parsed on its own and the results are unioned,
    - `*`       every value of the field, optionally stepped (`*/15`),
    - `a-b`     inclusive range, optionally stepped (`1-10/2`),
    - `a`       single value.

Values are decimal integers or, for the month and day-of-week fields, symbolic names (`JAN`,
`Mon`, `friday`). The result is always a deduplicated, ascending tuple; a field either resolves
completely or raises a `CronParseError`.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from src.cron.dictionaries import resolve_name
from src.cron.errors import EmptyFieldError, FormatError, InvalidValueError, RangeOrderError
from src.cron.schema import FieldConstraints
from src.cron.validators import validate_in_range, validate_not_empty, validate_step

_INTEGER_RE = re.compile(r"\d+", flags=re.ASCII)
_STEP_RE = re.compile(r"-?\d+", flags=re.ASCII)


def _to_int(text: str, constraints: FieldConstraints) -> int:
    # int() refuses strings beyond sys.get_int_max_str_digits().
    try:
        return int(text)
    except ValueError as exc:
        raise InvalidValueError(constraints.name, text) from exc


def _resolve_value(token: str, constraints: FieldConstraints) -> int:
    """Resolve a numeric or symbolic token (not yet range-checked)."""

    value = token.strip()
    if _INTEGER_RE.fullmatch(value):
        return _to_int(value, constraints)

    number = resolve_name(value, constraints.kind)
    if number is not None:
        return number

    raise InvalidValueError(constraints.name, value)


def _parse_step(step_text: str, expression: str, constraints: FieldConstraints) -> int:
    value = step_text.strip()
    if not value:
        raise FormatError(
            f"Missing step value in expression: {expression!r}",
            text=expression,
            field_name=constraints.name,
        )
    if not _STEP_RE.fullmatch(value):
        raise InvalidValueError(constraints.name, value)

    step = _to_int(value, constraints)
    validate_step(step, constraints.name)
    return step


def _parse_wildcard(expression: str, constraints: FieldConstraints) -> range:
    base, has_step, step_text = expression.partition("/")
    if base.strip() != "*" or "/" in step_text:
        raise FormatError(
            f"Invalid wildcard expression: {expression!r}",
            text=expression,
            field_name=constraints.name,
        )

    step = _parse_step(step_text, expression, constraints) if has_step else 1
    return range(constraints.min, constraints.max + 1, step)


def _parse_range(expression: str, constraints: FieldConstraints) -> range:
    range_text, has_step, step_text = expression.partition("/")
    start_text, _, end_text = range_text.partition("-")
    if "/" in step_text or "-" in end_text or not start_text.strip() or not end_text.strip():
        raise FormatError(
            f"Invalid range expression: {expression!r}",
            text=expression,
            field_name=constraints.name,
        )

    start = _resolve_value(start_text, constraints)
    end = _resolve_value(end_text, constraints)
    validate_in_range(start, constraints)
    validate_in_range(end, constraints)
    if start > end:
        raise RangeOrderError(start, end, field_name=constraints.name)

    step = _parse_step(step_text, expression, constraints) if has_step else 1
    return range(start, end + 1, step)


def _parse_single(expression: str, constraints: FieldConstraints) -> tuple[int]:
    value = _resolve_value(expression, constraints)
    validate_in_range(value, constraints)
    return (value,)


def _parse_element(expression: str, constraints: FieldConstraints) -> Iterable[int]:
    """Parse one list element: a wildcard, a range or a single value."""

    if "*" in expression:
        return _parse_wildcard(expression, constraints)
    if "-" in expression:
        return _parse_range(expression, constraints)
    return _parse_single(expression, constraints)


def parse_field(text: str, constraints: FieldConstraints) -> tuple[int, ...]:
    """Parse one cron field into its expanded values.

    Raises:
        CronParseError: If the field is empty, malformed, or contains an invalid or out-of-range
            value or step.
    """

    validate_not_empty(text, constraints.name)
    expression = text.strip()

    if "," not in expression:
        return tuple(sorted(set(_parse_element(expression, constraints))))

    values: set[int] = set()
    for element in expression.split(","):
        # Blank elements (`1,,2`, `1, ,2`, `1,`) are rejected instead of skipped.
        if not element.strip():
            raise EmptyFieldError(constraints.name, text=expression)
        values.update(_parse_element(element.strip(), constraints))
    return tuple(sorted(values))
