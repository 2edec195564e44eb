"""CLI command for locale-aware sorting of lines."""

import logging
from typing import BinaryIO

import click

from loctext.cli.options import (
    effective_ignore_case,
    effective_locale,
    encoding_option,
    ignore_case_option,
    locale_option,
)
from loctext.cli.output import emit_json, format_option, handle_errors
from loctext.locales import resolve_locale
from loctext.logging import operation_context
from loctext.sorter import sort, sorted_unique
from loctext.text import decode_text

logger = logging.getLogger(__name__)


@click.command("sort")
@click.argument("source", type=click.File("rb"), default="-")
@locale_option
@ignore_case_option
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    default=False,
    help="Sort in descending order (equal lines keep their input order).",
)
@click.option(
    "--unique",
    "-u",
    is_flag=True,
    default=False,
    help="Keep only the first of lines that collate as equal.",
)
@encoding_option
@format_option
@click.pass_context
def sort_command(
    ctx: click.Context,
    source: BinaryIO,
    locale: str | None,
    ignore_case: bool | None,
    reverse: bool,
    unique: bool,
    encoding: str,
    output_format: str,
) -> None:
    """Sort the lines of SOURCE (a file, or stdin when omitted).

    The sort is stable: lines that collate as equal keep their input order.

    \b
    Examples:
        loctext sort --locale sv words.txt
        printf 'öl\\nzebra\\n' | loctext sort --locale sv
        loctext sort --ignore-case --unique names.txt --format json
    """
    json_output = output_format == "json"
    locale = effective_locale(ctx, locale)
    ignore_case = effective_ignore_case(ctx, ignore_case)

    with operation_context("sort", locale), handle_errors(json_output):
        tag = resolve_locale(locale).tag
        lines = decode_text(source.read(), encoding).splitlines()
        if unique:
            result = sorted_unique(lines, tag, ignore_case=ignore_case)
            if reverse:
                result.reverse()
        else:
            result = sort(lines, tag, ignore_case=ignore_case, reverse=reverse)
        logger.info("Sorted %d line(s) into %d", len(lines), len(result))

    if json_output:
        emit_json(
            {
                "locale": tag,
                "ignore_case": ignore_case,
                "reverse": reverse,
                "unique": unique,
                "lines": result,
            }
        )
    else:
        for line in result:
            click.echo(line)
