"""Command-line entry point: expand cron expressions into per-field tables.

Usage:
    cron-explain "*/15 0 1,15 * 1-5 /usr/bin/find"
    cron-explain --format json "0 9 * * MON-FRI backup.sh" "30 2 1 * * report.sh"

Every expression is parsed independently; the process exits with 1 if any of them is invalid.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from src.config.logging import configure_logging
from src.config.settings import Settings, load_settings
from src.cron.errors import CronParseError
from src.cron.parser import parse
from src.render.formatter import format_json, format_table

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cron-explain",
        description="Expand cron expressions into the minutes, hours, days and months they match.",
        epilog='Example: cron-explain "*/15 0 1,15 * 1-5 /usr/bin/find"',
    )
    parser.add_argument(
        "expressions",
        nargs="+",
        metavar="EXPRESSION",
        help="Cron expression: five fields followed by a command (quote it as one argument).",
    )
    parser.add_argument(
        "--format",
        choices=("table", "json"),
        default=None,
        help="Output format (default: CRON_OUTPUT_FORMAT or 'table').",
    )
    return parser


def _render(text: str, *, output_format: str, settings: Settings) -> str:
    expression = parse(text)
    if output_format == "json":
        return format_json(expression)
    return format_table(expression, field_width=settings.field_width)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse and print every expression given on the command line.

    Returns:
        The process exit code: 0 if every expression parsed, 1 otherwise.
    """

    args = _build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except RuntimeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    configure_logging(settings.log_level)
    output_format = args.format or settings.output_format

    exit_code = EXIT_OK
    rendered: list[str] = []
    for text in args.expressions:
        try:
            rendered.append(_render(text, output_format=output_format, settings=settings))
        except CronParseError as exc:
            logger.info("rejected expression=%r reason=%s", text, exc)
            print(f"Error: {exc}", file=sys.stderr)
            exit_code = EXIT_FAILURE

    if rendered:
        separator = "\n" if output_format == "json" else "\n\n"
        print(separator.join(rendered))
    return exit_code


def run() -> None:
    """Console-script wrapper around `main`."""

    raise SystemExit(main())


if __name__ == "__main__":
    run()
