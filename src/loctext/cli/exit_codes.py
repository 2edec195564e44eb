"""Centralized exit codes for all CLI commands.

Exit code ranges:
    0: Success
    1-9: General errors
    10-19: Validation errors (input, config, locale)
    20-29: Search results
    30-39: Data errors
"""

from enum import IntEnum

from loctext.exceptions import (
    LocTextError,
    MalformedTextError,
    RuleTableError,
    UnknownLocaleError,
    UnsupportedOperationError,
)


class ExitCode(IntEnum):
    """Exit codes for loctext CLI commands."""

    # Success (0)
    SUCCESS = 0

    # General errors (1-9)
    GENERAL_ERROR = 1
    INTERRUPTED = 2

    # Validation errors (10-19)
    INVALID_INPUT = 10
    CONFIG_ERROR = 11
    UNKNOWN_LOCALE = 12
    UNSUPPORTED_OPERATION = 13

    # Search results (20-29)
    NO_MATCH = 20

    # Data errors (30-39)
    RULE_TABLE_ERROR = 30


def exit_code_for(error: LocTextError) -> ExitCode:
    """Map a library error to its CLI exit code."""
    if isinstance(error, MalformedTextError):
        return ExitCode.INVALID_INPUT
    if isinstance(error, UnknownLocaleError):
        return ExitCode.UNKNOWN_LOCALE
    if isinstance(error, UnsupportedOperationError):
        return ExitCode.UNSUPPORTED_OPERATION
    if isinstance(error, RuleTableError):
        return ExitCode.RULE_TABLE_ERROR
    return ExitCode.GENERAL_ERROR
