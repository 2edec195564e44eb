"""Shared options and argument handling for loctext commands."""

from __future__ import annotations

import click

from loctext.config.models import LocTextConfig
from loctext.text import decode_text

STDIN_MARKER = "-"

locale_option = click.option(
    "--locale",
    "-l",
    default=None,
    help="Locale identifier such as 'sv' or 'tr_TR'. Defaults to the "
    "configured default locale, then root.",
)

ignore_case_option = click.option(
    "--ignore-case/--match-case",
    default=None,
    help="Fold case before comparing (default from config).",
)

encoding_option = click.option(
    "--encoding",
    default="utf-8",
    show_default=True,
    help="Encoding used to decode input read from stdin or a file.",
)


def get_cli_config(ctx: click.Context) -> LocTextConfig:
    """Return the configuration loaded by the main group."""
    return ctx.find_root().obj["config"]


def effective_locale(ctx: click.Context, locale: str | None) -> str | None:
    """Pick the command's locale: explicit option first, then config."""
    if locale is not None:
        return locale
    return get_cli_config(ctx).text.default_locale


def effective_ignore_case(ctx: click.Context, ignore_case: bool | None) -> bool:
    """Pick case sensitivity: explicit flag first, then config."""
    if ignore_case is not None:
        return ignore_case
    return get_cli_config(ctx).text.ignore_case


def read_text_argument(value: str, encoding: str = "utf-8") -> str:
    """Resolve a TEXT argument, reading all of stdin when it is "-".

    A single trailing newline from stdin is dropped.

    Raises:
        MalformedTextError: If stdin does not decode with ``encoding``.
    """
    if value != STDIN_MARKER:
        return value
    data = click.get_binary_stream("stdin").read()
    text = decode_text(data, encoding)
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text
