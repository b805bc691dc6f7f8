"""Configuration file loading and discovery.

This module handles finding and loading configuration files from various
locations and formats (TOML, YAML, JSON).
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any

import yaml

from hexprobe.core.exceptions import ConfigError

# Config file names to search for (in order of preference)
CONFIG_FILE_NAMES = [
    ".hexprobe.toml",
    ".hexprobe.yml",
    ".hexprobe.yaml",
    ".hexprobe.json",
]

# User-level config directories
USER_CONFIG_DIRS = [
    Path.home() / ".config" / "hexprobe",
    Path.home() / ".hexprobe",
]


class ConfigLoader:
    """Loads and parses configuration files.

    Handles automatic discovery of config files in the working directory,
    its parents, and user-level config directories.
    """

    def find_config_file(self, start_path: Path | None = None) -> Path | None:
        """Find a configuration file by searching standard locations.

        Searches in the following order:
        1. The start_path directory (or cwd if not specified)
        2. Parent directories up to the root
        3. User config directories (~/.config/hexprobe, ~/.hexprobe)

        Args:
            start_path: Directory to start searching from.

        Returns:
            Path to the config file if found, None otherwise.
        """
        search_dirs: list[Path] = []

        start = Path(start_path).resolve() if start_path else Path.cwd()

        current = start
        while current != current.parent:
            search_dirs.append(current)
            current = current.parent
        search_dirs.append(current)

        search_dirs.extend(USER_CONFIG_DIRS)

        for search_dir in search_dirs:
            if not search_dir.exists():
                continue

            for config_name in CONFIG_FILE_NAMES:
                config_path = search_dir / config_name
                if config_path.is_file():
                    return config_path

        return None

    def load_dict(self, path: Path | str) -> dict[str, Any]:
        """Load and parse a configuration file into a dictionary.

        Values are validated later, once every source has been merged.

        Args:
            path: Path to the configuration file.

        Returns:
            The parsed mapping.

        Raises:
            ConfigError: If the file is missing, cannot be read or parsed,
                or does not hold a mapping.
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.is_file():
            raise ConfigError(f"Configuration path is not a file: {path}")

        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Failed to read config file {path}: {e}") from e

        suffix = path.suffix.lower()
        if suffix == ".toml":
            data = self._load_toml(content, path)
        elif suffix in (".yml", ".yaml"):
            data = self._load_yaml(content, path)
        else:
            data = self._load_json(content, path)

        if not isinstance(data, dict):
            raise ConfigError(f"Config file must contain a mapping, got: {type(data).__name__}")
        return data

    def _load_toml(self, content: str, path: Path) -> Any:
        try:
            return tomllib.loads(content)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    def _load_yaml(self, content: str, path: Path) -> Any:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        return {} if data is None else data

    def _load_json(self, content: str, path: Path) -> Any:
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e
