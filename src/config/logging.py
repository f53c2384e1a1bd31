"""Logging configuration for the CLI process."""

from __future__ import annotations

import logging
import os


def configure_logging(level: str | None = None) -> None:
    """Configure Python logging for the process.

    Logs are written to stderr so they never mix with the rendered expression on stdout.
    """

    log_level = (level or os.getenv("LOG_LEVEL") or "WARNING").upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
