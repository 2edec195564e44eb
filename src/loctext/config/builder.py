"""Configuration builder with explicit layering.

This module provides ConfigBuilder for building LocTextConfig by composing
configuration sources with explicit precedence handling.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from loctext.config.env import EnvReader
from loctext.config.models import LocTextConfig, LoggingConfig, TextConfig


@dataclass
class ConfigSource:
    """Configuration values from a single source.

    None values indicate "not specified in this source" and will not
    override values from lower-precedence sources.
    """

    # Text config
    default_locale: str | None = None
    ignore_case: bool | None = None
    normalization_form: str | None = None

    # Logging config
    logging_level: str | None = None
    logging_file: Path | None = None
    logging_format: str | None = None
    logging_include_stderr: bool | None = None
    logging_max_bytes: int | None = None
    logging_backup_count: int | None = None


class ConfigBuilder:
    """Builds LocTextConfig by layering ConfigSources with precedence.

    Later sources override earlier ones (for non-None values).

    Example:
        builder = ConfigBuilder()
        builder.apply(source_from_file(file_config))
        builder.apply(source_from_env(reader))
        builder.apply(cli_source)
        config = builder.build()
    """

    def __init__(self) -> None:
        """Initialize the builder with no values set."""
        self._values: dict[str, Any] = {}
        self._sources: dict[str, str] = {}

    def apply(self, source: ConfigSource, source_name: str = "unknown") -> None:
        """Apply configuration source, overriding existing values.

        Args:
            source: Configuration source to apply.
            source_name: Label recorded for each value this source sets.
        """
        for field_obj in fields(source):
            value = getattr(source, field_obj.name)
            if value is not None:
                self._values[field_obj.name] = value
                self._sources[field_obj.name] = source_name

    def source_of(self, key: str) -> str:
        """Return which source set a value ("default" if none did)."""
        return self._sources.get(key, "default")

    def _get(self, key: str, default: Any) -> Any:
        return self._values.get(key, default)

    def build(self) -> LocTextConfig:
        """Build the final LocTextConfig with defaults for unset values.

        Raises:
            ValueError: If a merged value fails model validation.
        """
        text = TextConfig(
            default_locale=self._get("default_locale", None),
            ignore_case=self._get("ignore_case", False),
            normalization_form=self._get("normalization_form", "NFC"),
        )

        logging_config = LoggingConfig(
            level=self._get("logging_level", "warning"),
            file=self._get("logging_file", None),
            format=self._get("logging_format", "text"),
            include_stderr=self._get("logging_include_stderr", False),
            max_bytes=self._get("logging_max_bytes", 10_485_760),
            backup_count=self._get("logging_backup_count", 5),
        )

        return LocTextConfig(text=text, logging=logging_config)


def source_from_file(file_config: dict[str, Any]) -> ConfigSource:
    """Create ConfigSource from a parsed TOML config file.

    Recognized sections::

        [text]
        default_locale = "tr"
        ignore_case = false
        normalization_form = "NFC"

        [logging]
        level = "info"
        file = "~/.loctext/loctext.log"
        format = "json"
    """
    text = file_config.get("text", {})
    logging_conf = file_config.get("logging", {})

    log_file = logging_conf.get("file")
    return ConfigSource(
        default_locale=text.get("default_locale"),
        ignore_case=text.get("ignore_case"),
        normalization_form=text.get("normalization_form"),
        logging_level=logging_conf.get("level"),
        logging_file=Path(log_file).expanduser() if log_file else None,
        logging_format=logging_conf.get("format"),
        logging_include_stderr=logging_conf.get("include_stderr"),
        logging_max_bytes=logging_conf.get("max_bytes"),
        logging_backup_count=logging_conf.get("backup_count"),
    )


def source_from_env(reader: EnvReader) -> ConfigSource:
    """Create ConfigSource from LOCTEXT_* environment variables."""
    return ConfigSource(
        default_locale=reader.get_str("LOCTEXT_LOCALE"),
        ignore_case=reader.get_bool("LOCTEXT_IGNORE_CASE"),
        normalization_form=reader.get_str("LOCTEXT_NORMALIZATION_FORM"),
        logging_level=reader.get_str("LOCTEXT_LOG_LEVEL"),
        logging_file=reader.get_path("LOCTEXT_LOG_FILE"),
        logging_format=reader.get_str("LOCTEXT_LOG_FORMAT"),
        logging_max_bytes=reader.get_int("LOCTEXT_LOG_MAX_BYTES"),
        logging_backup_count=reader.get_int("LOCTEXT_LOG_BACKUP_COUNT"),
    )
