"""Core data models for hexprobe.

This module defines the Pydantic models used throughout hexprobe for
describing how a dump is rendered and for reporting byte statistics.
"""

from pydantic import BaseModel, ConfigDict, Field


class RenderConfig(BaseModel):
    """Resolved rendering configuration for a single run.

    Shared read-only by the formatter and stream driver for the whole
    run. Built by the CLI (or the Python API) from config sources.
    """

    model_config = ConfigDict(frozen=True)

    bytes_per_line: int = Field(default=16, ge=1, description="Number of bytes rendered per line")
    show_ascii: bool = Field(default=True, description="Whether to render the ASCII column")
    show_offset: bool = Field(default=True, description="Whether to render the offset column")
    uppercase_hex: bool = Field(default=False, description="Render hex digits in uppercase")
    color_enabled: bool = Field(default=True, description="Color-code bytes by class")
    start_offset: int = Field(default=0, ge=0, description="Byte offset to start reading from")
    length_limit: int | None = Field(
        default=None,
        ge=0,
        description="Maximum number of bytes to read (None reads to end of input)",
    )


class StatsReport(BaseModel):
    """Summary of the bytes seen during a run.

    Produced once at the end of a run by ``ByteStats.report()``.
    Whitespace bytes are counted in the printable bucket.
    """

    model_config = ConfigDict(frozen=True)

    total_bytes: int = Field(default=0, description="Total number of bytes seen")
    unique_bytes: int = Field(default=0, ge=0, le=256, description="Distinct byte values seen")
    null_bytes: int = Field(default=0, description="Count of 0x00 bytes")
    printable_bytes: int = Field(default=0, description="Count of printable and whitespace bytes")
    high_bytes: int = Field(default=0, description="Count of bytes with the high bit set")
    control_bytes: int = Field(default=0, description="Count of remaining control bytes")
    null_percent: float = Field(default=0.0, description="Null bytes as a percentage of the total")
    printable_percent: float = Field(default=0.0, description="Printable bytes as a percentage of the total")
    high_percent: float = Field(default=0.0, description="High bytes as a percentage of the total")
    control_percent: float = Field(default=0.0, description="Control bytes as a percentage of the total")
    entropy_estimate: float = Field(
        default=0.0,
        description="Rough entropy estimate from the distinct value count (unique / 256 * 8)",
    )
    shannon_entropy: float = Field(default=0.0, description="Shannon entropy in bits per byte")
