"""Structured logging module for loctext.

Provides configurable logging with JSON format support and file rotation,
plus an operation context that tags records with command and locale.
"""

from loctext.logging.config import configure_logging
from loctext.logging.context import (
    OperationContextFilter,
    clear_operation_context,
    get_operation_context,
    operation_context,
    set_operation_context,
)
from loctext.logging.handlers import JSONFormatter

__all__ = [
    "JSONFormatter",
    "OperationContextFilter",
    "clear_operation_context",
    "configure_logging",
    "get_operation_context",
    "operation_context",
    "set_operation_context",
]
