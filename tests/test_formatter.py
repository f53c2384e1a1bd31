"""Tests for table and JSON renderings of parsed expressions."""

from __future__ import annotations

import json

from src.cron import parse
from src.cron.schema import ParsedExpression
from src.render.formatter import format_json, format_table


def test_format_reference_table() -> None:
    output = format_table(parse("*/15 0 1,15 * 1-5 /usr/bin/find"))
    assert output.split("\n") == [
        "minute        0 15 30 45",
        "hour          0",
        "day of month  1 15",
        "month         1 2 3 4 5 6 7 8 9 10 11 12",
        "day of week   1 2 3 4 5",
        "command       /usr/bin/find",
    ]
    assert not output.endswith("\n")


def test_format_all_wildcards() -> None:
    lines = format_table(parse("* * * * * /bin/true")).split("\n")
    assert lines[0] == "minute        " + " ".join(str(i) for i in range(60))
    assert lines[1] == "hour          " + " ".join(str(i) for i in range(24))
    assert lines[4] == "day of week   0 1 2 3 4 5 6"


def test_format_command_with_arguments() -> None:
    lines = format_table(parse("0 0 * * * /usr/bin/find /tmp -name '*.log'")).split("\n")
    assert lines[-1] == "command       /usr/bin/find /tmp -name '*.log'"


def test_format_custom_field_width() -> None:
    lines = format_table(parse("0 0 1 1 0 cmd"), field_width=16).split("\n")
    assert lines[0] == "minute          0"
    assert lines[2] == "day of month    1"


def test_format_json_round_trip() -> None:
    expression = parse("0 9 * * MON-FRI backup.sh --full")
    payload = json.loads(format_json(expression))
    assert payload["minute"] == [0]
    assert payload["day_of_week"] == [1, 2, 3, 4, 5]
    assert payload["command"] == "backup.sh --full"
    assert ParsedExpression.model_validate_json(format_json(expression)) == expression
