"""
Pytest configuration for the convergence tests.

Configures pytest-asyncio for async test support.
"""

import pytest

from converge.logging import LoggingConfig


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line(
        "markers", "asyncio: mark test as async"
    )


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep the shared log level at its default between tests."""
    yield
    LoggingConfig().update(log_level="info", log_output="stderr")
