"""CLI commands for comparing and searching text."""

import logging

import click

from loctext.cli.exit_codes import ExitCode
from loctext.cli.options import (
    STDIN_MARKER,
    effective_ignore_case,
    effective_locale,
    encoding_option,
    ignore_case_option,
    locale_option,
    read_text_argument,
)
from loctext.cli.output import emit_json, format_option, handle_errors
from loctext.collator import (
    CollationOptions,
    Ordering,
    compare,
    equals,
    equals_fixed,
    find_all,
    find_all_fixed,
)
from loctext.locales import resolve_locale
from loctext.logging import operation_context
from loctext.text import validate_text

logger = logging.getLogger(__name__)

_FIXED_HELP = "Compare exact codepoints, without normalization or locale rules."


def _read_operands(first: str, second: str, encoding: str) -> tuple[str, str]:
    """Resolve two TEXT arguments, at most one of which may read stdin."""
    if first == STDIN_MARKER and second == STDIN_MARKER:
        raise click.UsageError("Only one argument may be '-' (stdin).")
    return read_text_argument(first, encoding), read_text_argument(second, encoding)


def _fixed_ordering(a: str, b: str) -> Ordering:
    validate_text(a)
    validate_text(b)
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


@click.command("compare")
@click.argument("first")
@click.argument("second")
@locale_option
@ignore_case_option
@click.option("--fixed", is_flag=True, default=False, help=_FIXED_HELP)
@encoding_option
@format_option
@click.pass_context
def compare_command(
    ctx: click.Context,
    first: str,
    second: str,
    locale: str | None,
    ignore_case: bool | None,
    fixed: bool,
    encoding: str,
    output_format: str,
) -> None:
    """Compare FIRST and SECOND.

    Prints "less", "equal" or "greater". With --fixed, the comparison is
    by raw codepoint and ignores --locale and --ignore-case. Either
    argument may be "-" to read it from stdin.

    \b
    Examples:
        loctext compare --locale sv öl zebra    # greater
        loctext compare --ignore-case Apple apple
        loctext compare --fixed "é" "é"
    """
    json_output = output_format == "json"
    locale = effective_locale(ctx, locale)
    ignore_case = effective_ignore_case(ctx, ignore_case)

    with operation_context("compare", locale), handle_errors(json_output):
        first, second = _read_operands(first, second, encoding)
        if fixed:
            ordering = _fixed_ordering(first, second)
            same = equals_fixed(first, second)
            tag = None
        else:
            tag = resolve_locale(locale).tag
            options = CollationOptions(locale=tag, ignore_case=ignore_case)
            ordering = compare(first, second, options)
            same = equals(first, second, options)
        logger.debug("Compared operands: %s", ordering.name)

    if json_output:
        emit_json(
            {
                "first": first,
                "second": second,
                "mode": "fixed" if fixed else "collation",
                "locale": tag,
                "ignore_case": ignore_case and not fixed,
                "ordering": ordering.name.lower(),
                "equal": same,
            }
        )
    else:
        click.echo(ordering.name.lower())


@click.command("find")
@click.argument("haystack")
@click.argument("needle")
@locale_option
@ignore_case_option
@click.option("--fixed", is_flag=True, default=False, help=_FIXED_HELP)
@click.option(
    "--all",
    "find_every",
    is_flag=True,
    default=False,
    help="Report every non-overlapping match, not just the first.",
)
@encoding_option
@format_option
@click.pass_context
def find_command(
    ctx: click.Context,
    haystack: str,
    needle: str,
    locale: str | None,
    ignore_case: bool | None,
    fixed: bool,
    find_every: bool,
    encoding: str,
    output_format: str,
) -> None:
    """Find NEEDLE in HAYSTACK.

    Prints one "START END MATCH" line per match, with codepoint offsets
    into HAYSTACK. Exits with code 20 when nothing matches.
    HAYSTACK or NEEDLE may be "-" to read it from stdin.

    \b
    Examples:
        loctext find "Crème brûlée" "CRÈME" --ignore-case
        loctext find --all "banana" "an"
    """
    json_output = output_format == "json"
    locale = effective_locale(ctx, locale)
    ignore_case = effective_ignore_case(ctx, ignore_case)

    with operation_context("find", locale), handle_errors(json_output):
        haystack, needle = _read_operands(haystack, needle, encoding)
        if fixed:
            spans = find_all_fixed(haystack, needle)
        else:
            tag = resolve_locale(locale).tag
            options = CollationOptions(locale=tag, ignore_case=ignore_case)
            spans = find_all(haystack, needle, options)
        if not find_every:
            spans = spans[:1]
        logger.debug("Found %d match(es)", len(spans))

    if json_output:
        emit_json(
            {
                "haystack": haystack,
                "needle": needle,
                "mode": "fixed" if fixed else "collation",
                "matches": [
                    {"start": s.start, "end": s.end, "text": s.slice(haystack)}
                    for s in spans
                ],
            }
        )
    else:
        for span in spans:
            click.echo(f"{span.start} {span.end} {span.slice(haystack)}")

    if not spans:
        if not json_output:
            click.echo("No match.", err=True)
        ctx.exit(ExitCode.NO_MATCH)
