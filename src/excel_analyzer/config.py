"""Configuration management for the Excel analyzer.

This module provides centralized configuration using pydantic-settings.
All configuration options can be set via environment variables with the
EXA_ prefix, or via a .env file in the working directory.

Environment Variables:
    EXA_DEFAULT_HEADER_ROWS: Header rows used when the input is invalid (default: 1)
    EXA_DEFAULT_SAMPLE_ROWS: Sample rows used when the input is invalid (default: 5)
    EXA_DEFAULT_OUTPUT_FORMAT: Initially selected format (default: Markdown)
    EXA_WINDOW_WIDTH: Initial window width in pixels (default: 800)
    EXA_WINDOW_HEIGHT: Initial window height in pixels (default: 600)
    EXA_POLL_INTERVAL_MS: Result polling interval of the window (default: 50)
    EXA_LOG_LEVEL: Logging level (default: INFO)
    EXA_DEBUG: Enable debug mode (default: false)
"""

import logging
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from excel_analyzer.models import (
    DEFAULT_HEADER_ROWS,
    DEFAULT_SAMPLE_ROWS,
    OutputFormat,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Example .env file:
        EXA_DEFAULT_SAMPLE_ROWS=10
        EXA_DEFAULT_OUTPUT_FORMAT=XML
        EXA_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="EXA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # =========================================================================
    # Report Settings
    # =========================================================================

    default_header_rows: int = DEFAULT_HEADER_ROWS
    """Header-row count used when the typed value is not a number."""

    default_sample_rows: int = DEFAULT_SAMPLE_ROWS
    """Sample-row count used when the typed value is not a number."""

    default_output_format: OutputFormat = OutputFormat.MARKDOWN
    """Output format selected when the window opens."""

    # =========================================================================
    # Window Settings
    # =========================================================================

    window_width: int = 800
    """Initial window width in pixels."""

    window_height: int = 600
    """Initial window height in pixels."""

    poll_interval_ms: int = 50
    """Interval between non-blocking polls of the result queue."""

    # =========================================================================
    # Logging Settings
    # =========================================================================

    log_level: str = "INFO"
    """Logging level: DEBUG, INFO, WARNING, ERROR, or CRITICAL."""

    debug: bool = False
    """Enable debug mode with additional logging."""

    # =========================================================================
    # Validators
    # =========================================================================

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of: {', '.join(valid_levels)}"
            )
        return upper_v

    @field_validator("default_header_rows", "default_sample_rows")
    @classmethod
    def validate_row_defaults(cls, v: int) -> int:
        """Validate default row counts are not negative."""
        if v < 0:
            raise ValueError(f"Default row counts must be at least 0, got {v}")
        return v

    @field_validator("window_width", "window_height", "poll_interval_ms")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate window dimensions and poll interval are positive."""
        if v < 1:
            raise ValueError(f"Value must be at least 1, got {v}")
        return v

    @field_validator("default_output_format", mode="before")
    @classmethod
    def validate_output_format(cls, v: Any) -> Any:
        """Accept selector labels such as "Plain Text" as well as enum values."""
        if isinstance(v, str):
            return OutputFormat.from_label(v)
        return v

    # =========================================================================
    # Computed Properties
    # =========================================================================

    @property
    def log_level_int(self) -> int:
        """Get log level as integer for logging module."""
        level: int = getattr(logging, self.log_level)
        return level

    @property
    def window_geometry(self) -> str:
        """Get the window size as a Tk geometry string."""
        return f"{self.window_width}x{self.window_height}"

    def to_safe_dict(self) -> dict[str, Any]:
        """Convert settings to a dictionary suitable for logging."""
        return {
            "default_header_rows": self.default_header_rows,
            "default_sample_rows": self.default_sample_rows,
            "default_output_format": self.default_output_format.value,
            "window_width": self.window_width,
            "window_height": self.window_height,
            "poll_interval_ms": self.poll_interval_ms,
            "log_level": self.log_level,
            "debug": self.debug,
        }


def validate_settings_on_startup(s: Settings) -> None:
    """Log a configuration summary on application startup.

    Args:
        s: Settings instance to validate.
    """
    logger = logging.getLogger(__name__)

    if s.debug and s.log_level != "DEBUG":
        logger.warning(
            "Debug mode is enabled but log_level is %s; "
            "set EXA_LOG_LEVEL=DEBUG to see per-sheet details.",
            s.log_level,
        )

    logger.info(
        f"Configuration loaded: log_level={s.log_level}, debug={s.debug}, "
        f"default_header_rows={s.default_header_rows}, "
        f"default_sample_rows={s.default_sample_rows}, "
        f"default_output_format={s.default_output_format.value}"
    )


# Create the global settings instance
settings = Settings()
