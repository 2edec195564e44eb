"""CLI command for Unicode normalization."""

import logging

import click

from loctext.cli.options import encoding_option, get_cli_config, read_text_argument
from loctext.cli.output import emit_json, format_option, handle_errors
from loctext.logging import operation_context
from loctext.normalizer import NormalizationForm, is_normalized, normalize

logger = logging.getLogger(__name__)


@click.command("normalize")
@click.argument("text")
@click.option(
    "--form",
    type=click.Choice([f.value for f in NormalizationForm], case_sensitive=False),
    default=None,
    help="Normalization form (default from config, NFC if unset).",
)
@click.option(
    "--check",
    is_flag=True,
    default=False,
    help="Only report whether TEXT is already in the form.",
)
@encoding_option
@format_option
@click.pass_context
def normalize_command(
    ctx: click.Context,
    text: str,
    form: str | None,
    check: bool,
    encoding: str,
    output_format: str,
) -> None:
    """Normalize TEXT to a Unicode normalization form.

    Pass "-" as TEXT to read from stdin.

    \b
    Examples:
        loctext normalize "café"
        loctext normalize --form NFD "café" --format json
        echo "ﬁ" | loctext normalize --form NFKC -
    """
    json_output = output_format == "json"
    form = (form or get_cli_config(ctx).text.normalization_form).upper()

    with operation_context("normalize"), handle_errors(json_output):
        value = read_text_argument(text, encoding)
        already = is_normalized(value, form)
        result = value if check else normalize(value, form)
        logger.debug("Normalized %d codepoints to %s", len(value), form)

    if json_output:
        emit_json(
            {
                "form": form,
                "input": value,
                "result": result,
                "is_normalized": already,
            }
        )
    elif check:
        click.echo("yes" if already else "no")
    else:
        click.echo(result)
