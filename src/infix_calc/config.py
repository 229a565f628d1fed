"""
Configuration management for infix-calc.

Handles loading configuration from environment variables and an optional
.env file, provides defaults for all settings, and sets up structlog.
"""

import logging
import sys

import structlog
from pydantic_settings import BaseSettings, SettingsConfigDict

from infix_calc.models import Associativity


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="INFIX_CALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application settings
    app_name: str = "infix-calc"
    log_level: str = "WARNING"

    # Evaluation settings
    strict: bool = True  # Reject unbalanced parentheses and leftover operands
    power_associativity: Associativity = Associativity.RIGHT


# Global settings instance
settings = Settings()


def _stderr_logger_factory(*args) -> structlog.PrintLogger:
    # Resolved per logger so a replaced sys.stderr is honoured.
    return structlog.PrintLogger(sys.stderr)


def configure_logging(level: str | None = None) -> None:
    """Route structlog output to stderr, dropping events below ``level``."""
    name = (level or settings.log_level).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )


def ensure_logging() -> None:
    """Install the stderr setup unless the application configured structlog."""
    if not structlog.is_configured():
        configure_logging()


ensure_logging()
