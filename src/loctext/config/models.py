"""Configuration data models.

This module defines dataclasses for loctext configuration options.
Configuration only affects the command-line front end; library calls take
their locale explicitly and default to root.
"""

from dataclasses import dataclass, field
from pathlib import Path

from loctext.normalizer import NormalizationForm


@dataclass
class LoggingConfig:
    """Configuration for structured logging."""

    # Log level: debug, info, warning, error
    level: str = "warning"

    # Log file path (None = stderr only)
    file: Path | None = None

    # Log format: text or json
    format: str = "text"

    # Also log to stderr when file is set
    include_stderr: bool = False

    # Rotation threshold in bytes (default 10MB)
    max_bytes: int = 10_485_760

    # Number of rotated files to keep
    backup_count: int = 5

    def __post_init__(self) -> None:
        """Validate configuration."""
        valid_levels = {"debug", "info", "warning", "error"}
        if self.level.casefold() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}, got {self.level}")
        valid_formats = {"text", "json"}
        if self.format.casefold() not in valid_formats:
            raise ValueError(
                f"format must be one of {valid_formats}, got {self.format}"
            )
        if self.max_bytes <= 0:
            raise ValueError("max_bytes must be positive")
        if self.backup_count < 0:
            raise ValueError("backup_count must be non-negative")


@dataclass
class TextConfig:
    """Defaults for text operations run from the command line."""

    default_locale: str | None = None
    """Locale used when a command gets no --locale. None selects root."""

    ignore_case: bool = False
    """Whether comparison commands fold case by default."""

    normalization_form: str = "NFC"
    """Form used by the normalize command when none is given."""

    def __post_init__(self) -> None:
        """Validate configuration."""
        valid_forms = {f.value for f in NormalizationForm}
        if self.normalization_form.upper() not in valid_forms:
            raise ValueError(
                f"normalization_form must be one of {valid_forms}, "
                f"got {self.normalization_form}"
            )
        self.normalization_form = self.normalization_form.upper()


@dataclass
class LocTextConfig:
    """Main configuration for loctext."""

    text: TextConfig = field(default_factory=TextConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
