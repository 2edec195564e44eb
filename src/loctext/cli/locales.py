"""CLI command for listing supported locales."""

import click

from loctext.cli.output import emit_json, format_option, handle_errors
from loctext.locales import available_locales, get_rules
from loctext.normalizer import unicode_version


@click.command("locales")
@format_option
def locales_command(output_format: str) -> None:
    """List the locales that have rule tables.

    Any identifier whose language matches one of these (such as "sv-FI"
    or "tr_TR.UTF-8") is accepted by --locale.
    """
    json_output = output_format == "json"

    with handle_errors(json_output):
        rule_sets = [get_rules(tag) for tag in available_locales()]

    if json_output:
        emit_json(
            {
                "unicode_version": unicode_version(),
                "locales": [
                    {
                        "locale": rules.language,
                        "name": rules.name,
                        "tailored_elements": rules.tailored_count,
                        "title_case": rules.title_supported,
                    }
                    for rules in rule_sets
                ],
            }
        )
        return

    click.echo(f"Unicode {unicode_version()}")
    click.echo("")
    click.echo(f"{'LOCALE':<8} {'NAME':<20} {'TAILORED':>8}  TITLE")
    for rules in rule_sets:
        click.echo(
            f"{rules.language:<8} {rules.name:<20} {rules.tailored_count:>8}  "
            f"{'yes' if rules.title_supported else 'no'}"
        )
