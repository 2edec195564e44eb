"""Configuration management for loctext.

Configuration is loaded with precedence handling:
1. CLI flags (highest priority)
2. Environment variables (LOCTEXT_*)
3. Config file (~/.loctext/config.toml)
4. Default values (lowest priority)
"""

from loctext.config.builder import (
    ConfigBuilder,
    ConfigSource,
    source_from_env,
    source_from_file,
)
from loctext.config.env import EnvReader
from loctext.config.loader import (
    build_config,
    clear_config_cache,
    get_config,
    get_default_config_path,
    load_config_file,
)
from loctext.config.models import LocTextConfig, LoggingConfig, TextConfig
from loctext.config.toml_parser import TomlParseError, load_toml_file, parse_toml

__all__ = [
    # Models
    "LocTextConfig",
    "LoggingConfig",
    "TextConfig",
    # Loader
    "build_config",
    "clear_config_cache",
    "get_config",
    "get_default_config_path",
    "load_config_file",
    # Layering
    "ConfigBuilder",
    "ConfigSource",
    "EnvReader",
    "source_from_env",
    "source_from_file",
    # TOML
    "TomlParseError",
    "load_toml_file",
    "parse_toml",
]
