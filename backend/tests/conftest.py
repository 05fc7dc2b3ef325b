"""Shared test configuration: pytest markers and offline defaults."""

import pytest

from config import settings


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: loads the real embedding model or calls the Gemini API"
    )


@pytest.fixture(autouse=True)
def _no_api_key(monkeypatch):
    """Blank the API key so a stray model call fails fast instead of reaching the network."""
    monkeypatch.setattr(settings, "gemini_api_key", "")
