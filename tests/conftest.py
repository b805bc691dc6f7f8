"""Pytest fixtures for hexprobe tests.

This module provides reusable fixtures for testing hexprobe components,
including sample binary files and default rendering configurations.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Prefer the checkout over any installed copy
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hexprobe.config import reset_config
from hexprobe.core.models import RenderConfig


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Keep config discovery and HEXPROBE_* variables from leaking into tests."""
    for name in (
        "HEXPROBE_CONFIG_PATH",
        "HEXPROBE_COLUMNS",
        "HEXPROBE_UPPERCASE",
        "HEXPROBE_SHOW_ASCII",
        "HEXPROBE_SHOW_OFFSET",
        "HEXPROBE_COLOR",
        "HEXPROBE_BUFFER_SIZE",
        "HEXPROBE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("hexprobe.config.loader.USER_CONFIG_DIRS", [])
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def plain_config() -> RenderConfig:
    """Return the default configuration with color disabled."""
    return RenderConfig(color_enabled=False)


@pytest.fixture
def sample_bytes() -> bytes:
    """Return 64 bytes covering every byte class."""
    return bytes(range(64))


@pytest.fixture
def sample_file(tmp_path: Path, sample_bytes: bytes) -> Path:
    """Create a 64-byte file whose bytes equal their offsets."""
    path = tmp_path / "sample.bin"
    path.write_bytes(sample_bytes)
    return path


@pytest.fixture
def empty_file(tmp_path: Path) -> Path:
    """Create an empty file."""
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    return path


@pytest.fixture
def elf_file(tmp_path: Path) -> Path:
    """Create a small file starting with ELF magic bytes."""
    path = tmp_path / "elf.bin"
    path.write_bytes(b"\x7fELF\x02\x01\x01\x00" + b"\x00" * 8 + b"\x03\x00>\x00")
    return path
