"""Tests for whole-expression parsing (field splitting, command joining, fail-fast errors)."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from src.cron import parse
from src.cron.errors import (
    EmptyExpressionError,
    EmptyFieldError,
    FormatError,
    InvalidValueError,
    RangeError,
    StepError,
)
from src.cron.parser import split_expression


def test_parse_reference_expression() -> None:
    expression = parse("*/15 0 1,15 * 1-5 /usr/bin/find")
    assert expression.minute == (0, 15, 30, 45)
    assert expression.hour == (0,)
    assert expression.day_of_month == (1, 15)
    assert expression.month == tuple(range(1, 13))
    assert expression.day_of_week == (1, 2, 3, 4, 5)
    assert expression.command == "/usr/bin/find"


def test_parse_lists_steps_and_stepped_ranges() -> None:
    expression = parse("5,10,15 */2 1-15/3 1,6,12 0-4 /script.sh")
    assert expression.minute == (5, 10, 15)
    assert expression.hour == (0, 2, 4, 6, 8, 10, 12, 14, 16, 18, 20, 22)
    assert expression.day_of_month == (1, 4, 7, 10, 13)
    assert expression.month == (1, 6, 12)
    assert expression.day_of_week == (0, 1, 2, 3, 4)
    assert expression.command == "/script.sh"


def test_parse_all_wildcards() -> None:
    expression = parse("* * * * * /bin/true")
    assert len(expression.minute) == 60
    assert len(expression.hour) == 24
    assert len(expression.day_of_month) == 31
    assert len(expression.month) == 12
    assert len(expression.day_of_week) == 7


def test_parse_symbolic_names() -> None:
    expression = parse("0 9 * jan,jul MON-FRI backup.sh")
    assert expression.month == (1, 7)
    assert expression.day_of_week == (1, 2, 3, 4, 5)


def test_command_keeps_arguments_and_collapses_whitespace() -> None:
    expression = parse("0 0 * * *   /usr/bin/find  /tmp   -name '*.log'")
    assert expression.command == "/usr/bin/find /tmp -name '*.log'"


def test_command_tokens_are_passed_through_verbatim() -> None:
    expression = parse('30 2 1 * * echo "a,b-c */5" > /dev/null')
    assert expression.command == 'echo "a,b-c */5" > /dev/null'


def test_surrounding_and_mixed_whitespace_is_ignored() -> None:
    expression = parse("  \t0\t12 *  * *\n/run.sh  ")
    assert expression.minute == (0,)
    assert expression.hour == (12,)
    assert expression.command == "/run.sh"


@pytest.mark.parametrize("text", ["", "   ", "\n\t", None])
def test_empty_expression(text: str | None) -> None:
    with pytest.raises(EmptyExpressionError, match="Cron expression cannot be empty"):
        parse(text)


def test_missing_command_reports_part_count() -> None:
    with pytest.raises(FormatError, match="got 5") as exc:
        parse("* * * * *")
    assert "Expected at least 6 parts" in str(exc.value)


def test_too_few_fields() -> None:
    with pytest.raises(FormatError, match="got 3"):
        parse("* * *")


def test_fail_fast_reports_earliest_field() -> None:
    with pytest.raises(RangeError) as exc:
        parse("60 24 32 13 7 /cmd")
    assert exc.value.field_name == "minute"
    assert exc.value.value == 60


def test_field_errors_name_their_field() -> None:
    with pytest.raises(RangeError, match="day of month"):
        parse("0 0 32 * * /cmd")
    with pytest.raises(InvalidValueError, match="month: 'FOO'"):
        parse("0 0 1 FOO * /cmd")
    with pytest.raises(StepError, match="day of week"):
        parse("0 0 * * */0 /cmd")
    with pytest.raises(EmptyFieldError, match="hour"):
        parse("0 1,,2 * * * /cmd")


def test_nonstandard_shortcuts_are_not_supported() -> None:
    with pytest.raises(FormatError):
        parse("@daily /cmd")


def test_parsed_expression_is_immutable() -> None:
    expression = parse("0 0 * * * /cmd")
    with pytest.raises(ValidationError):
        expression.command = "other"  # type: ignore[misc]


def test_successful_parse_is_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="src.cron.parser"):
        parse("0 0 * * * /cmd")
    assert any("command='/cmd'" in r.getMessage() for r in caplog.records)


def test_split_expression() -> None:
    assert split_expression(" a  b\tc ") == ["a", "b", "c"]
    with pytest.raises(EmptyExpressionError):
        split_expression("  ")
