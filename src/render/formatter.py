"""Text renderings of a parsed cron expression.

The table layout is one line per field: the field name left-justified to a fixed column width,
followed by the expanded values separated by single spaces, and a final `command` line.
"""

from __future__ import annotations

from src.cron.schema import FIELD_CONSTRAINTS, FIELD_ORDER, ParsedExpression

FIELD_WIDTH = 14
COMMAND_LABEL = "command"


def _format_line(label: str, value: str, *, field_width: int) -> str:
    return f"{label.ljust(field_width)}{value}"


def format_table(expression: ParsedExpression, *, field_width: int = FIELD_WIDTH) -> str:
    """Render an expression as a fixed-width table (no trailing newline)."""

    lines = [
        _format_line(
            FIELD_CONSTRAINTS[kind].name,
            " ".join(str(v) for v in expression.values_for(kind)),
            field_width=field_width,
        )
        for kind in FIELD_ORDER
    ]
    lines.append(_format_line(COMMAND_LABEL, expression.command, field_width=field_width))
    return "\n".join(lines)


def format_json(expression: ParsedExpression) -> str:
    """Render an expression as a compact JSON object."""

    return expression.model_dump_json()
