"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (passed directly to functions)
2. Environment variables (LOCTEXT_*)
3. Config file (~/.loctext/config.toml)
4. Default values

Environment variables:
- LOCTEXT_CONFIG_PATH: Path to config file (overrides default location)
- LOCTEXT_LOCALE: Default locale for CLI commands
- LOCTEXT_IGNORE_CASE: Fold case by default in comparison commands
- LOCTEXT_NORMALIZATION_FORM: Default form for the normalize command
- LOCTEXT_LOG_LEVEL: Log level (debug, info, warning, error)
- LOCTEXT_LOG_FILE: Log file path
- LOCTEXT_LOG_FORMAT: Log format (text, json)
- LOCTEXT_LOG_MAX_BYTES: Rotation threshold for the log file
- LOCTEXT_LOG_BACKUP_COUNT: Number of rotated log files to keep
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path

from loctext.config.builder import (
    ConfigBuilder,
    ConfigSource,
    source_from_env,
    source_from_file,
)
from loctext.config.env import EnvReader
from loctext.config.models import LocTextConfig
from loctext.config.toml_parser import load_toml_file

logger = logging.getLogger(__name__)

# Default config location
DEFAULT_CONFIG_DIR = Path.home() / ".loctext"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"

# Cache for loaded config files (path -> (parsed dict, mtime))
_config_cache: dict[Path, tuple[dict, float]] = {}
_config_cache_lock = threading.Lock()


def get_default_config_path() -> Path:
    """Get the default config file path.

    Can be overridden by LOCTEXT_CONFIG_PATH environment variable.
    """
    env_path = os.environ.get("LOCTEXT_CONFIG_PATH")
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_FILE


def load_config_file(path: Path | None = None, *, strict: bool = False) -> dict:
    """Load configuration from TOML file.

    Results are cached with mtime-based invalidation. Use
    clear_config_cache() to force a reload regardless of mtime.

    Thread-safe: uses a lock to protect concurrent access to the cache.

    Args:
        path: Path to config file. If None, uses default location.
        strict: If True, raise TomlParseError on parse failures.
                If False (default), return empty dict on errors.

    Returns:
        Parsed configuration dict. Empty dict if file doesn't exist.

    Raises:
        TomlParseError: When strict=True and the file cannot be parsed.
    """
    if path is None:
        path = get_default_config_path()

    try:
        current_mtime = path.stat().st_mtime
    except FileNotFoundError:
        current_mtime = 0.0

    # Fast path: check cache without lock (dict reads are atomic in CPython)
    cached = _config_cache.get(path)
    if cached is not None and cached[1] == current_mtime:
        return cached[0]

    with _config_cache_lock:
        # Double-check after acquiring lock (another thread may have loaded it)
        cached = _config_cache.get(path)
        if cached is not None and cached[1] == current_mtime:
            return cached[0]

        result = load_toml_file(path, strict=strict)
        _config_cache[path] = (result, current_mtime)
        return result


def clear_config_cache() -> None:
    """Clear the config file cache. Primarily useful for testing."""
    with _config_cache_lock:
        _config_cache.clear()


def build_config(
    config_path: Path | None = None,
    # CLI overrides (highest precedence)
    default_locale: str | None = None,
    ignore_case: bool | None = None,
    normalization_form: str | None = None,
    # Optional dependency injection for testing
    env_reader: EnvReader | None = None,
    *,
    strict: bool = False,
) -> tuple[LocTextConfig, ConfigBuilder]:
    """Build configuration and keep the builder for source reporting."""
    reader = env_reader or EnvReader()
    file_config = load_config_file(config_path, strict=strict)

    cli_source = ConfigSource(
        default_locale=default_locale,
        ignore_case=ignore_case,
        normalization_form=normalization_form,
    )

    builder = ConfigBuilder()
    builder.apply(source_from_file(file_config), source_name="file")
    builder.apply(source_from_env(reader), source_name="env")
    builder.apply(cli_source, source_name="cli")
    return builder.build(), builder


def get_config(
    config_path: Path | None = None,
    default_locale: str | None = None,
    ignore_case: bool | None = None,
    normalization_form: str | None = None,
    env_reader: EnvReader | None = None,
    *,
    strict: bool = False,
) -> LocTextConfig:
    """Get loctext configuration with full precedence handling.

    Args:
        config_path: Path to config file (overrides LOCTEXT_CONFIG_PATH).
        default_locale: CLI override for the default locale.
        ignore_case: CLI override for case folding.
        normalization_form: CLI override for the normalization form.
        env_reader: Optional EnvReader for testing (uses os.environ if None).
        strict: If True, raise TomlParseError on config file parse failures.

    Returns:
        LocTextConfig with merged configuration.

    Raises:
        TomlParseError: When strict=True and the config file cannot be parsed.
        ValueError: When a merged value is invalid.
    """
    config, _ = build_config(
        config_path,
        default_locale=default_locale,
        ignore_case=ignore_case,
        normalization_form=normalization_form,
        env_reader=env_reader,
        strict=strict,
    )
    return config
