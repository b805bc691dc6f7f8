"""Environment variable mapping for hexprobe configuration.

This module defines the environment variables that can be used to
configure hexprobe and provides utilities for reading them. Values are
passed through as strings and validated by the configuration schema.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from hexprobe.core.exceptions import ConfigError

# Environment variable names
ENV_CONFIG_PATH = "HEXPROBE_CONFIG_PATH"
ENV_COLUMNS = "HEXPROBE_COLUMNS"
ENV_UPPERCASE = "HEXPROBE_UPPERCASE"
ENV_SHOW_ASCII = "HEXPROBE_SHOW_ASCII"
ENV_SHOW_OFFSET = "HEXPROBE_SHOW_OFFSET"
ENV_COLOR = "HEXPROBE_COLOR"
ENV_BUFFER_SIZE = "HEXPROBE_BUFFER_SIZE"
ENV_LOG_LEVEL = "HEXPROBE_LOG_LEVEL"

# Environment variable -> (section, key)
_ENV_MAPPINGS: dict[str, tuple[str, str]] = {
    ENV_COLUMNS: ("display", "columns"),
    ENV_UPPERCASE: ("display", "uppercase"),
    ENV_SHOW_ASCII: ("display", "show_ascii"),
    ENV_SHOW_OFFSET: ("display", "show_offset"),
    ENV_COLOR: ("display", "color"),
    ENV_BUFFER_SIZE: ("reader", "buffer_size"),
}


def get_env_overrides() -> dict[str, Any]:
    """Get configuration overrides from environment variables.

    Returns:
        Nested dictionary of configuration values from environment
        variables, with empty sections removed.
    """
    overrides: dict[str, Any] = {
        "display": {},
        "reader": {},
    }

    for env_name, (section, key) in _ENV_MAPPINGS.items():
        if env_name in os.environ:
            overrides[section][key] = os.environ[env_name].strip()

    if ENV_LOG_LEVEL in os.environ:
        overrides["log_level"] = os.environ[ENV_LOG_LEVEL].lower()

    return {k: v for k, v in overrides.items() if v}


def get_config_path_from_env() -> Path | None:
    """Get the config file path from environment variable.

    Returns:
        Path to config file if set, None otherwise.

    Raises:
        ConfigError: If the variable names a file that does not exist.
    """
    value = os.environ.get(ENV_CONFIG_PATH)
    if not value:
        return None

    path = Path(value)
    if not path.is_file():
        raise ConfigError(
            f"{ENV_CONFIG_PATH} does not name a config file: {path}",
            config_key=ENV_CONFIG_PATH,
        )
    return path


def get_env_var_docs() -> dict[str, str]:
    """Get documentation for all environment variables.

    Returns:
        Dictionary mapping variable names to descriptions.
    """
    return {
        ENV_CONFIG_PATH: "Path to configuration file",
        ENV_COLUMNS: "Bytes per line (positive integer)",
        ENV_UPPERCASE: "Render uppercase hex digits (true/false)",
        ENV_SHOW_ASCII: "Render the ASCII column (true/false)",
        ENV_SHOW_OFFSET: "Render the offset column (true/false)",
        ENV_COLOR: "Color-code bytes by class (true/false)",
        ENV_BUFFER_SIZE: "Read buffer size (e.g., 4096, 64K)",
        ENV_LOG_LEVEL: "Logging level (debug, info, warning, error, critical)",
    }
