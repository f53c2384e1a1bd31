"""Cron expression parser.

An expression is five whitespace-separated fields followed by a command:

    minute hour day_of_month month day_of_week command...

Parsing is fail-fast: the first invalid field aborts the whole expression and its error propagates
unchanged.
"""

from __future__ import annotations

import logging
import re

from src.cron.errors import EmptyExpressionError
from src.cron.field_parser import parse_field
from src.cron.schema import FIELD_ORDER, ParsedExpression, constraints_for
from src.cron.validators import validate_format

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


def split_expression(text: str | None) -> list[str]:
    """Split an expression on runs of whitespace.

    Raises:
        EmptyExpressionError: If the expression is empty or whitespace-only.
    """

    value = (text or "").strip()
    if not value:
        raise EmptyExpressionError()
    return _WHITESPACE_RE.split(value)


def parse(text: str | None) -> ParsedExpression:
    """Parse a cron expression into a validated `ParsedExpression`.

    Raises:
        CronParseError: On the first empty, malformed or out-of-range part of the expression.
    """

    parts = split_expression(text)
    validate_format(parts)

    field_parts = parts[: len(FIELD_ORDER)]
    command = " ".join(parts[len(FIELD_ORDER):])

    fields = {
        kind.value: parse_field(part, constraints_for(kind))
        for kind, part in zip(FIELD_ORDER, field_parts)
    }
    expression = ParsedExpression(command=command, **fields)

    logger.debug("parsed fields=%s command=%r", " ".join(field_parts), command)
    return expression
