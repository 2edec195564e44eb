"""Tests for cli/exit_codes.py module."""

import pytest

from loctext.cli.exit_codes import ExitCode, exit_code_for
from loctext.exceptions import (
    LocTextError,
    MalformedTextError,
    RuleTableError,
    UnknownLocaleError,
    UnsupportedOperationError,
)


class TestExitCode:
    """Tests for ExitCode enum."""

    def test_success_is_zero(self) -> None:
        """SUCCESS should be 0."""
        assert ExitCode.SUCCESS == 0

    def test_exit_codes_are_unique(self) -> None:
        """All exit codes should have unique values."""
        values = [int(code) for code in ExitCode]
        assert len(values) == len(set(values))

    def test_exit_code_ranges(self) -> None:
        """Exit codes should be within expected ranges."""
        # General errors (1-9)
        assert 1 <= ExitCode.GENERAL_ERROR <= 9
        assert 1 <= ExitCode.INTERRUPTED <= 9

        # Validation errors (10-19)
        assert 10 <= ExitCode.INVALID_INPUT <= 19
        assert 10 <= ExitCode.CONFIG_ERROR <= 19
        assert 10 <= ExitCode.UNKNOWN_LOCALE <= 19
        assert 10 <= ExitCode.UNSUPPORTED_OPERATION <= 19

        # Search results (20-29)
        assert 20 <= ExitCode.NO_MATCH <= 29

        # Data errors (30-39)
        assert 30 <= ExitCode.RULE_TABLE_ERROR <= 39


class TestExitCodeFor:
    """Tests for mapping library errors to exit codes."""

    @pytest.mark.parametrize(
        ("error", "expected"),
        [
            (MalformedTextError("bad", index=3), ExitCode.INVALID_INPUT),
            (UnknownLocaleError("xx", "no rule table"), ExitCode.UNKNOWN_LOCALE),
            (
                UnsupportedOperationError("title", "ja"),
                ExitCode.UNSUPPORTED_OPERATION,
            ),
            (RuleTableError("broken", language="sv"), ExitCode.RULE_TABLE_ERROR),
            (LocTextError("other"), ExitCode.GENERAL_ERROR),
        ],
    )
    def test_mapping(self, error: LocTextError, expected: ExitCode) -> None:
        """Each error type maps to its own exit code."""
        assert exit_code_for(error) == expected
