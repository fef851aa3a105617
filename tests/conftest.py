"""Pytest configuration and fixtures for hashtool tests."""

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove hashtool input variables inherited from the test process."""
    for name in ("DATA", "ALGO", "EXPECTED", "HASHTOOL_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
