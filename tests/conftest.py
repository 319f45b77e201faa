"""Pytest configuration and shared fixtures for the plaintify test suite."""

import pytest

from plaintify.renderers.plaintext import PlainTextRenderer


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def renderer() -> PlainTextRenderer:
    """Provide a plain text renderer with default options."""
    return PlainTextRenderer()
