"""CLI commands for locale-aware case mapping."""

from __future__ import annotations

import logging
from collections.abc import Callable

import click

from loctext.casemap import fold_case, to_lower, to_title, to_upper
from loctext.cli.options import (
    effective_locale,
    encoding_option,
    locale_option,
    read_text_argument,
)
from loctext.cli.output import emit_json, format_option, handle_errors
from loctext.locales import resolve_locale
from loctext.logging import operation_context

logger = logging.getLogger(__name__)


def _run_case_mapping(
    ctx: click.Context,
    command: str,
    mapping: Callable[..., str],
    text: str,
    locale: str | None,
    encoding: str,
    output_format: str,
) -> None:
    """Apply a case mapping and print the result.

    Args:
        ctx: Click context holding the loaded config.
        command: Command name, used for logging context and JSON output.
        mapping: One of the case mapping functions.
        text: TEXT argument, or "-" for stdin.
        locale: --locale value, or None to use the configured default.
        encoding: Encoding for stdin input.
        output_format: "text" or "json".
    """
    json_output = output_format == "json"
    locale = effective_locale(ctx, locale)

    with operation_context(command, locale), handle_errors(json_output):
        resolved = resolve_locale(locale)
        value = read_text_argument(text, encoding)
        result = mapping(value, resolved)
        logger.debug("Mapped %d codepoints", len(value))

    if json_output:
        emit_json(
            {
                "operation": command,
                "locale": resolved.tag,
                "input": value,
                "result": result,
            }
        )
    else:
        click.echo(result)


@click.command("upper")
@click.argument("text")
@locale_option
@encoding_option
@format_option
@click.pass_context
def upper_command(
    ctx: click.Context,
    text: str,
    locale: str | None,
    encoding: str,
    output_format: str,
) -> None:
    """Convert TEXT to upper case.

    \b
    Examples:
        loctext upper --locale tr istanbul     # İSTANBUL
        loctext upper --locale el "ἀρχή"       # ΑΡΧΗ
    """
    _run_case_mapping(ctx, "upper", to_upper, text, locale, encoding, output_format)


@click.command("lower")
@click.argument("text")
@locale_option
@encoding_option
@format_option
@click.pass_context
def lower_command(
    ctx: click.Context,
    text: str,
    locale: str | None,
    encoding: str,
    output_format: str,
) -> None:
    """Convert TEXT to lower case.

    \b
    Examples:
        loctext lower --locale tr ISPARTA      # ısparta
    """
    _run_case_mapping(ctx, "lower", to_lower, text, locale, encoding, output_format)


@click.command("title")
@click.argument("text")
@locale_option
@encoding_option
@format_option
@click.pass_context
def title_command(
    ctx: click.Context,
    text: str,
    locale: str | None,
    encoding: str,
    output_format: str,
) -> None:
    """Capitalize the first letter of each word in TEXT.

    Fails with exit code 13 for locales without title casing.

    \b
    Examples:
        loctext title --locale nl "ijsselmeer"  # IJsselmeer
    """
    _run_case_mapping(ctx, "title", to_title, text, locale, encoding, output_format)


@click.command("fold")
@click.argument("text")
@locale_option
@encoding_option
@format_option
@click.pass_context
def fold_command(
    ctx: click.Context,
    text: str,
    locale: str | None,
    encoding: str,
    output_format: str,
) -> None:
    """Case-fold TEXT for caseless comparison.

    \b
    Examples:
        loctext fold "Straße"                   # strasse
    """
    _run_case_mapping(ctx, "fold", fold_case, text, locale, encoding, output_format)
