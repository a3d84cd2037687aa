"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest

from clicky_sdk import configure_replace, get_config


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: integration tests against real Clicky API")


@pytest.fixture(autouse=True)
def empty_default_config() -> Iterator[None]:
    """Start every test from empty process-wide defaults."""
    saved = get_config()
    configure_replace({})
    yield
    configure_replace(saved)
