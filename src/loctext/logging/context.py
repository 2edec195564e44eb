"""Operation context for structured logging.

Provides context propagation using contextvars, enabling automatic injection
of the running command and active locale into log records.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

_command: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "command", default=None
)
_locale: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "locale", default=None
)


def set_operation_context(command: str, locale: str | None = None) -> None:
    """Set the current operation context.

    Args:
        command: Name of the operation (e.g., "sort", "compare").
        locale: Locale tag in effect, or None for root.
    """
    _command.set(command)
    _locale.set(locale)


def clear_operation_context() -> None:
    """Clear the current operation context."""
    _command.set(None)
    _locale.set(None)


@contextmanager
def operation_context(
    command: str, locale: str | None = None
) -> Generator[None, None, None]:
    """Context manager for an operation's logging context.

    Sets context on entry and restores the previous context on exit.

    Example:
        with operation_context("sort", "sv"):
            logger.info("Sorting input")  # Automatically includes context
    """
    old_command = _command.get()
    old_locale = _locale.get()
    try:
        set_operation_context(command, locale)
        yield
    finally:
        _command.set(old_command)
        _locale.set(old_locale)


def get_operation_context() -> tuple[str | None, str | None]:
    """Get current operation context as (command, locale)."""
    return _command.get(), _locale.get()


class OperationContextFilter(logging.Filter):
    """Logging filter that injects operation context into log records.

    Adds command and locale attributes for JSON output, and a compact
    op_tag like "[sort:sv] " for text output.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Inject operation context into log record.

        Returns:
            Always True (does not filter, only enriches).
        """
        command, locale = get_operation_context()

        record.command = command
        record.locale = locale

        if command:
            record.op_tag = f"[{command}:{locale or 'root'}] "
        else:
            record.op_tag = ""

        return True
