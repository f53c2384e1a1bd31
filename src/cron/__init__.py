"""Cron expression parsing and validation.

The cron layer converts a classic five-field crontab line into a strict `ParsedExpression` object
whose fields are fully expanded, sorted integer tuples. Rendering the result is left to
`src.render`.
"""

from src.cron.errors import CronParseError
from src.cron.field_parser import parse_field
from src.cron.parser import parse
from src.cron.schema import FieldConstraints, FieldKind, ParsedExpression

__all__ = [
    "CronParseError",
    "FieldConstraints",
    "FieldKind",
    "ParsedExpression",
    "parse",
    "parse_field",
]
