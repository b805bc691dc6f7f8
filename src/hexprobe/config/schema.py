"""Configuration schema definitions using Pydantic Settings.

This module defines all configuration models for hexprobe with proper
validation, defaults, and documentation.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hexprobe.core.models import RenderConfig


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class DisplaySettings(BaseModel):
    """Settings controlling how lines are rendered."""

    columns: int = Field(
        default=16,
        ge=1,
        description="Number of bytes rendered per line",
    )
    uppercase: bool = Field(
        default=False,
        description="Render hex digits in uppercase",
    )
    show_ascii: bool = Field(
        default=True,
        description="Render the ASCII column",
    )
    show_offset: bool = Field(
        default=True,
        description="Render the offset column",
    )
    color: bool = Field(
        default=True,
        description="Color-code bytes by class",
    )


class ReaderSettings(BaseModel):
    """Settings for reading input."""

    buffer_size: int = Field(
        default=4096,
        ge=1,
        description="Maximum number of bytes read from the input at once",
    )

    @field_validator("buffer_size", mode="before")
    @classmethod
    def parse_buffer_size(cls, v: Any) -> int:
        """Parse buffer size from string format (e.g., '64K', '1MB')."""
        if isinstance(v, str):
            v = v.strip().upper()
            multipliers = {
                "B": 1,
                "K": 1024,
                "KB": 1024,
                "M": 1024 * 1024,
                "MB": 1024 * 1024,
            }
            for suffix, mult in sorted(multipliers.items(), key=lambda x: -len(x[0])):
                if v.endswith(suffix):
                    return int(float(v[: -len(suffix)]) * mult)
            return int(v)
        return int(v) if v is not None else 4096


class HexprobeConfig(BaseSettings):
    """Main configuration for hexprobe.

    Combines all settings sections into a single configuration object.
    This can be loaded from environment variables, config files, or
    constructed programmatically.
    """

    model_config = SettingsConfigDict(
        env_prefix="HEXPROBE_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    display: DisplaySettings = Field(
        default_factory=DisplaySettings,
        description="Display settings",
    )
    reader: ReaderSettings = Field(
        default_factory=ReaderSettings,
        description="Input reading settings",
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Logging level",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: Any) -> LogLevel:
        """Validate and normalize log level."""
        if v is None:
            return LogLevel.WARNING
        if isinstance(v, LogLevel):
            return v
        v = str(v).lower()
        try:
            return LogLevel(v)
        except ValueError:
            valid = ", ".join(level.value for level in LogLevel)
            raise ValueError(f"log_level must be one of: {valid}")

    def to_render_config(self, start_offset: int = 0, length_limit: int | None = None) -> RenderConfig:
        """Convert to a RenderConfig for use with the stream driver.

        Args:
            start_offset: Byte offset to start reading from.
            length_limit: Maximum number of bytes to read, or None for all.

        Returns:
            A RenderConfig instance with settings from this config.
        """
        return RenderConfig(
            bytes_per_line=self.display.columns,
            show_ascii=self.display.show_ascii,
            show_offset=self.display.show_offset,
            uppercase_hex=self.display.uppercase,
            color_enabled=self.display.color,
            start_offset=start_offset,
            length_limit=length_limit,
        )
