"""Shared fixtures for the infix-calc test suite."""

import pytest
import structlog

from infix_calc.config import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore the package's stderr logging after each test."""
    yield
    structlog.reset_defaults()
    configure_logging()
