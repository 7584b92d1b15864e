"""Root test configuration."""

import logging

import pytest
import structlog

from scopedash.client import ManagementClient

BASE_URL = "https://mgmt.example.com"


def _configure_test_logging():
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def pytest_configure(config):
    """Configure structlog for tests to suppress debug/info output."""
    logging.basicConfig(level=logging.WARNING, force=True)
    _configure_test_logging()


@pytest.fixture
def restore_structlog():
    """Put the test structlog configuration back after a test reconfigures it."""
    yield
    structlog.reset_defaults()
    _configure_test_logging()


@pytest.fixture
def client():
    return ManagementClient(BASE_URL, session_cookie="session-123")
