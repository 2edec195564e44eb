"""Tests for EnvReader class."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from loctext.config.env import EnvReader


class TestEnvReaderGetStr:
    """Tests for EnvReader.get_str method."""

    def test_returns_value_when_set(self) -> None:
        """Should return the value when environment variable is set."""
        reader = EnvReader(env={"LOCTEXT_LOCALE": "tr"})
        assert reader.get_str("LOCTEXT_LOCALE") == "tr"

    def test_returns_none_when_not_set(self) -> None:
        """Should return None when environment variable is not set."""
        reader = EnvReader(env={})
        assert reader.get_str("LOCTEXT_LOCALE") is None

    def test_returns_default_when_not_set(self) -> None:
        """Should return default when environment variable is not set."""
        reader = EnvReader(env={})
        assert reader.get_str("LOCTEXT_LOCALE", "sv") == "sv"

    def test_empty_value_counts_as_unset(self) -> None:
        """Should return default when variable is set to empty."""
        reader = EnvReader(env={"LOCTEXT_LOCALE": ""})
        assert reader.get_str("LOCTEXT_LOCALE", "sv") == "sv"

    def test_reads_os_environ_by_default(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Should fall back to os.environ when no mapping is injected."""
        monkeypatch.setenv("LOCTEXT_LOCALE", "cs")
        assert EnvReader().get_str("LOCTEXT_LOCALE") == "cs"


class TestEnvReaderGetInt:
    """Tests for EnvReader.get_int method."""

    def test_returns_value_when_set(self) -> None:
        """Should parse and return integer when environment variable is set."""
        reader = EnvReader(env={"MY_VAR": "42"})
        assert reader.get_int("MY_VAR") == 42

    def test_returns_default_when_not_set(self) -> None:
        """Should return default when environment variable is not set."""
        reader = EnvReader(env={})
        assert reader.get_int("MY_VAR", 100) == 100

    def test_returns_default_and_warns_for_invalid(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Should return default and log warning for invalid integer."""
        reader = EnvReader(env={"MY_VAR": "not_a_number"})
        with caplog.at_level(logging.WARNING):
            result = reader.get_int("MY_VAR", 100)
        assert result == 100
        assert "Invalid integer value for MY_VAR: not_a_number" in caplog.text


class TestEnvReaderGetBool:
    """Tests for EnvReader.get_bool method."""

    @pytest.mark.parametrize("value", ["true", "TRUE", "1", "yes", "on"])
    def test_true_values(self, value: str) -> None:
        """Should recognize common truthy spellings."""
        reader = EnvReader(env={"LOCTEXT_IGNORE_CASE": value})
        assert reader.get_bool("LOCTEXT_IGNORE_CASE") is True

    @pytest.mark.parametrize("value", ["false", "0", "no", "off", "maybe"])
    def test_other_values_are_false(self, value: str) -> None:
        """Should treat any other non-empty value as false."""
        reader = EnvReader(env={"LOCTEXT_IGNORE_CASE": value})
        assert reader.get_bool("LOCTEXT_IGNORE_CASE") is False

    def test_unset_returns_default(self) -> None:
        """Should return default when unset or empty."""
        assert EnvReader(env={}).get_bool("X") is None
        assert EnvReader(env={"X": ""}).get_bool("X", True) is True


class TestEnvReaderGetPath:
    """Tests for EnvReader.get_path method."""

    def test_returns_path(self) -> None:
        """Should return a Path for a set variable."""
        reader = EnvReader(env={"LOCTEXT_LOG_FILE": "/var/log/loctext.log"})
        assert reader.get_path("LOCTEXT_LOG_FILE") == Path("/var/log/loctext.log")

    def test_expands_tilde(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        """Should expand tilde in path."""
        monkeypatch.setenv("HOME", str(tmp_path))
        reader = EnvReader(env={"LOCTEXT_LOG_FILE": "~/loctext.log"})
        assert reader.get_path("LOCTEXT_LOG_FILE") == tmp_path / "loctext.log"

    def test_returns_default_when_not_set(self) -> None:
        """Should return default when not set."""
        assert EnvReader(env={}).get_path("X", Path("/tmp")) == Path("/tmp")
