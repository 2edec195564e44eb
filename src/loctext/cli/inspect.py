"""CLI command for inspecting the codepoints of a text."""

import unicodedata
from typing import Any

import click

from loctext.cli.options import encoding_option, read_text_argument
from loctext.cli.output import emit_json, format_option, handle_errors
from loctext.logging import operation_context
from loctext.normalizer import NormalizationForm, is_normalized
from loctext.text import clusters, grapheme_length, text_length


def _codepoint_info(ch: str) -> dict[str, Any]:
    """Describe one codepoint."""
    return {
        "codepoint": f"U+{ord(ch):04X}",
        "char": ch,
        "name": unicodedata.name(ch, "<unnamed>"),
        "category": unicodedata.category(ch),
        "combining": unicodedata.combining(ch),
    }


def _format_human(
    value: str, parts: list[str], forms: dict[str, bool], codepoints: list[dict]
) -> str:
    lines = [
        f"Codepoints: {text_length(value)}",
        f"Clusters:   {len(parts)}",
        "Normalized: "
        + ", ".join(f"{form}={'yes' if ok else 'no'}" for form, ok in forms.items()),
        "",
    ]
    for info in codepoints:
        # Combining marks print on their own with a dotted circle base
        shown = f"◌{info['char']}" if info["combining"] else info["char"]
        lines.append(
            f"  {info['codepoint']:<9} {shown:<3} {info['category']}  {info['name']}"
        )
    return "\n".join(lines)


@click.command("inspect")
@click.argument("text")
@encoding_option
@format_option
def inspect_command(text: str, encoding: str, output_format: str) -> None:
    """Show the codepoints, clusters and normalization state of TEXT.

    Pass "-" as TEXT to read from stdin.

    \b
    Examples:
        loctext inspect "é"
        loctext inspect "ﬁ" --format json
    """
    json_output = output_format == "json"

    with operation_context("inspect"), handle_errors(json_output):
        value = read_text_argument(text, encoding)
        parts = clusters(value)
        forms = {f.value: is_normalized(value, f) for f in NormalizationForm}
        codepoints = [_codepoint_info(ch) for ch in value]

    if json_output:
        emit_json(
            {
                "text": value,
                "length": text_length(value),
                "grapheme_length": grapheme_length(value),
                "clusters": parts,
                "normalized": forms,
                "codepoints": codepoints,
            }
        )
    else:
        click.echo(_format_human(value, parts, forms, codepoints))
