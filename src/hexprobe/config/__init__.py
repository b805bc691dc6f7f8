"""Configuration management for hexprobe.

This module provides a configuration system with proper priority handling:

1. CLI arguments (highest priority)
2. Environment variables
3. Configuration file
4. Default values (lowest priority)

Example usage::

    from hexprobe.config import get_config_source, load_config

    config = load_config(cli_args={"columns": 32})
    print(config.display.columns)
    print(get_config_source("display.columns"))  # ConfigPriority.CLI
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from hexprobe.config.env import (
    ENV_BUFFER_SIZE,
    ENV_COLOR,
    ENV_COLUMNS,
    ENV_CONFIG_PATH,
    ENV_LOG_LEVEL,
    get_config_path_from_env,
    get_env_overrides,
)
from hexprobe.config.loader import ConfigLoader
from hexprobe.config.schema import (
    DisplaySettings,
    HexprobeConfig,
    LogLevel,
    ReaderSettings,
)
from hexprobe.core.exceptions import ConfigError

__all__ = [
    # Schema classes
    "DisplaySettings",
    "ReaderSettings",
    "HexprobeConfig",
    "LogLevel",
    # Loader
    "ConfigLoader",
    # Environment variables
    "ENV_BUFFER_SIZE",
    "ENV_COLOR",
    "ENV_COLUMNS",
    "ENV_CONFIG_PATH",
    "ENV_LOG_LEVEL",
    "get_env_overrides",
    # Priority handling
    "ConfigPriority",
    "get_config_source",
    "load_config",
    "reset_config",
]


class ConfigPriority(str, Enum):
    """Configuration source priority levels.

    Higher priority sources override lower priority ones.
    """

    DEFAULT = "default"
    CONFIG_FILE = "config_file"
    ENVIRONMENT = "environment"
    CLI = "cli"


# Source of each key set by the last load_config() call
_config_sources: dict[str, ConfigPriority] = {}

# Mapping of CLI arg names to config paths
_CLI_MAPPINGS: dict[str, tuple[str, str]] = {
    "columns": ("display", "columns"),
    "uppercase": ("display", "uppercase"),
    "show_ascii": ("display", "show_ascii"),
    "show_offset": ("display", "show_offset"),
    "color": ("display", "color"),
    "buffer_size": ("reader", "buffer_size"),
}


def _merge_configs(
    base: dict[str, Any],
    override: dict[str, Any],
    source: ConfigPriority,
) -> tuple[dict[str, Any], dict[str, ConfigPriority]]:
    """Recursively merge configuration dictionaries.

    Args:
        base: The base configuration dictionary.
        override: The overriding configuration dictionary.
        source: The priority source for the override values.

    Returns:
        A tuple of (merged_config, sources_dict) where sources_dict
        tracks which priority each key came from.
    """
    result = base.copy()
    sources: dict[str, ConfigPriority] = {}

    for key, value in override.items():
        if value is None:
            continue

        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            merged, nested_sources = _merge_configs(result[key], value, source)
            result[key] = merged
            for nested_key, nested_source in nested_sources.items():
                sources[f"{key}.{nested_key}"] = nested_source
        else:
            result[key] = value
            sources[key] = source

    return result, sources


def _normalize_cli_args(cli_args: dict[str, Any]) -> dict[str, Any]:
    """Normalize flat CLI argument names into the nested config structure."""
    result: dict[str, Any] = {"display": {}, "reader": {}}

    for arg_name, value in cli_args.items():
        if value is None:
            continue

        if arg_name in _CLI_MAPPINGS:
            section, key = _CLI_MAPPINGS[arg_name]
            result[section][key] = value
        else:
            result[arg_name] = value

    return {k: v for k, v in result.items() if v}


def load_config(
    config_path: Path | str | None = None,
    cli_args: dict[str, Any] | None = None,
    use_env: bool = True,
    use_file: bool = True,
) -> HexprobeConfig:
    """Load configuration with proper priority handling.

    Configuration is merged in the following order (later sources override earlier):
    1. Default values
    2. Configuration file (if found)
    3. Environment variables
    4. CLI arguments

    Args:
        config_path: Optional explicit path to a config file.
        cli_args: Optional dictionary of CLI argument overrides.
        use_env: Whether to apply environment variable overrides.
        use_file: Whether to look for and load config files.

    Returns:
        A fully merged HexprobeConfig instance.

    Raises:
        ConfigError: If a config file is missing or unreadable (including
            one named by HEXPROBE_CONFIG_PATH), or the merged configuration
            is invalid.
    """
    global _config_sources

    config_dict: dict[str, Any] = HexprobeConfig.model_construct().model_dump()
    sources: dict[str, ConfigPriority] = {}

    if use_file:
        loader = ConfigLoader()
        if config_path is not None:
            file_path: Path | None = Path(config_path)
        else:
            file_path = (get_config_path_from_env() if use_env else None) or loader.find_config_file()
        if file_path:
            file_dict = loader.load_dict(file_path)
            config_dict, file_sources = _merge_configs(
                config_dict, file_dict, ConfigPriority.CONFIG_FILE
            )
            sources.update(file_sources)

    if use_env:
        env_overrides = get_env_overrides()
        if env_overrides:
            config_dict, env_sources = _merge_configs(
                config_dict, env_overrides, ConfigPriority.ENVIRONMENT
            )
            sources.update(env_sources)

    if cli_args:
        cli_dict = _normalize_cli_args(cli_args)
        config_dict, cli_sources = _merge_configs(config_dict, cli_dict, ConfigPriority.CLI)
        sources.update(cli_sources)

    try:
        config = HexprobeConfig.model_validate(config_dict)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    _config_sources = sources

    return config


def get_config_source(key: str) -> ConfigPriority | None:
    """Get the priority source for a configuration key.

    Args:
        key: The configuration key (e.g., "display.columns").

    Returns:
        The ConfigPriority that provided this value, or None if using default.
    """
    return _config_sources.get(key)


def reset_config() -> None:
    """Forget the sources recorded by the last load.

    Primarily useful for testing.
    """
    global _config_sources
    _config_sources = {}
