"""Environment configuration and validation.

This module defines strongly-typed CLI settings loaded from environment variables (optionally via a
local `.env` file). Command-line flags take precedence over these values.
"""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.cron.schema import FIELD_CONSTRAINTS
from src.render.formatter import FIELD_WIDTH

OutputFormat = Literal["table", "json"]

_LONGEST_LABEL = max(len(c.name) for c in FIELD_CONSTRAINTS.values())


class Settings(BaseSettings):
    """CLI settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")
    output_format: OutputFormat = Field(default="table", alias="CRON_OUTPUT_FORMAT")
    field_width: int = Field(default=FIELD_WIDTH, alias="CRON_FIELD_WIDTH")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that the log level is a standard `logging` level name."""

        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {value!r}")
        return level

    @field_validator("field_width")
    @classmethod
    def validate_field_width(cls, value: int) -> int:
        """Validate that every field label fits in the name column with a separating space."""

        if value <= _LONGEST_LABEL:
            raise ValueError(f"CRON_FIELD_WIDTH must be greater than {_LONGEST_LABEL}")
        return value


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
