"""Shared fixtures for CLI tests."""

import pytest
from click.testing import CliRunner

from loctext.config.models import LocTextConfig, TextConfig


@pytest.fixture(autouse=True)
def skip_logging_setup(monkeypatch):
    """Keep CLI invocations from replacing the root logger's handlers."""
    monkeypatch.setattr("loctext.cli._configure_logging", lambda *args: None)


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture
def cli_obj() -> dict:
    """Context object with default configuration, skipping config loading."""
    return {"config": LocTextConfig()}


@pytest.fixture
def make_obj():
    """Build a context object with custom text settings."""

    def _make(**text_settings) -> dict:
        return {"config": LocTextConfig(text=TextConfig(**text_settings))}

    return _make
