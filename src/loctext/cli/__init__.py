"""CLI module for loctext."""

import dataclasses
import logging
from pathlib import Path

import click

from loctext.cli.exit_codes import ExitCode
from loctext.cli.output import error_exit
from loctext.config.models import LoggingConfig
from loctext.logging import configure_logging

_logging_configured: bool = False

logger = logging.getLogger(__name__)


def _configure_logging(
    base: LoggingConfig,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """Configure logging from the loaded config and CLI overrides.

    Args:
        base: Logging section of the loaded configuration.
        log_level: Override log level (debug, info, warning, error).
        log_file: Override log file path.
        log_json: Use JSON log format.
    """
    global _logging_configured
    if _logging_configured:
        return

    overrides = {
        "level": log_level,
        "file": log_file,
        "format": "json" if log_json else None,
    }
    final = dataclasses.replace(
        base, **{key: value for key, value in overrides.items() if value is not None}
    )
    configure_logging(final)
    _logging_configured = True


def _load_config(config_path: Path | None):
    """Load the effective configuration, exiting on a broken config file."""
    from loctext.config import TomlParseError, get_config

    try:
        return get_config(config_path=config_path, strict=True)
    except TomlParseError as e:
        error_exit(str(e), ExitCode.CONFIG_ERROR)
    except ValueError as e:
        error_exit(f"Invalid configuration: {e}", ExitCode.CONFIG_ERROR)


@click.group()
@click.version_option(package_name="loctext")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Config file to use instead of ~/.loctext/config.toml.",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: warning).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override log file path.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """loctext - Locale-aware text normalization, case mapping and sorting."""
    ctx.ensure_object(dict)

    # Preserve a config passed in by tests
    if "config" not in ctx.obj:
        ctx.obj["config"] = _load_config(config_path)

    _configure_logging(ctx.obj["config"].logging, log_level, log_file, log_json)
    logger.debug(
        "loctext starting: default_locale=%s, ignore_case=%s",
        ctx.obj["config"].text.default_locale or "root",
        ctx.obj["config"].text.ignore_case,
    )


# Defer import to avoid circular dependency
def _register_commands():
    from loctext.cli.casing import (
        fold_command,
        lower_command,
        title_command,
        upper_command,
    )
    from loctext.cli.inspect import inspect_command
    from loctext.cli.locales import locales_command
    from loctext.cli.match import compare_command, find_command
    from loctext.cli.normalize import normalize_command
    from loctext.cli.sort import sort_command

    main.add_command(normalize_command)
    main.add_command(upper_command)
    main.add_command(lower_command)
    main.add_command(title_command)
    main.add_command(fold_command)
    main.add_command(compare_command)
    main.add_command(find_command)
    main.add_command(sort_command)
    main.add_command(inspect_command)
    main.add_command(locales_command)


_register_commands()
