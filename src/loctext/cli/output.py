"""Unified CLI output formatting for JSON and human-readable output.

This module provides consistent error handling and output formatting
across all CLI commands.
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any, NoReturn

import click

from loctext.cli.exit_codes import ExitCode, exit_code_for
from loctext.exceptions import LocTextError

logger = logging.getLogger(__name__)

format_option = click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format.",
)


def error_exit(
    message: str,
    code: ExitCode | int,
    json_output: bool = False,
) -> NoReturn:
    """Exit with formatted error message.

    Args:
        message: Error message to display.
        code: Exit code to use (ExitCode enum or int).
        json_output: Whether to format output as JSON.

    Note:
        This function never returns; it always calls sys.exit().
    """
    if isinstance(code, ExitCode):
        code_name = code.name
        exit_value = int(code)
    else:
        code_name = "UNKNOWN_ERROR"
        exit_value = code

    if json_output:
        click.echo(
            json.dumps(
                {
                    "status": "failed",
                    "error": {
                        "code": code_name,
                        "message": message,
                    },
                },
                ensure_ascii=False,
            ),
            err=True,
        )
    else:
        click.echo(f"Error: {message}", err=True)

    sys.exit(exit_value)


@contextmanager
def handle_errors(json_output: bool = False) -> Generator[None, None, None]:
    """Turn library errors raised inside the block into a CLI exit."""
    try:
        yield
    except LocTextError as e:
        logger.debug("Operation failed: %s", e, exc_info=True)
        error_exit(e.message, exit_code_for(e), json_output)


def emit_json(data: dict[str, Any]) -> None:
    """Write a JSON document to stdout, keeping non-ASCII text readable."""
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))
