"""Byte statistics module for hexprobe.

This module provides the ByteStats class, a streaming accumulator of
per-class byte counts and distinct value tracking. Memory use is fixed
(a 256-slot occurrence table) regardless of how many bytes are folded in.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from hexprobe.core.classify import ByteClass, classify
from hexprobe.core.models import StatsReport


def _empty_counts() -> list[int]:
    return [0] * 256


@dataclass
class ByteStats:
    """Streaming byte statistics for a single run.

    Whitespace bytes are counted in the printable bucket, so the four
    buckets (null, printable, high, control) always sum to the total.

    Attributes:
        total_bytes: Number of bytes folded in so far.
        null_bytes: Count of 0x00 bytes.
        printable_bytes: Count of printable and whitespace bytes.
        high_bytes: Count of bytes 0x80 and above.
        control_bytes: Count of the remaining control bytes.
        value_counts: Occurrences of each byte value, indexed by value.

    Example:
        >>> stats = ByteStats()
        >>> stats.update_chunk(b"AB\\x00")
        >>> stats.total_bytes, stats.unique_count
        (3, 3)
    """

    total_bytes: int = 0
    null_bytes: int = 0
    printable_bytes: int = 0
    high_bytes: int = 0
    control_bytes: int = 0
    value_counts: list[int] = field(default_factory=_empty_counts, repr=False)

    def update(self, byte: int) -> None:
        """Fold a single byte into the statistics.

        Args:
            byte: Byte value in the range 0-255.
        """
        byte_class = classify(byte)
        self.total_bytes += 1
        self.value_counts[byte] += 1

        if byte_class is ByteClass.NULL:
            self.null_bytes += 1
        elif byte_class in (ByteClass.PRINTABLE, ByteClass.WHITESPACE):
            self.printable_bytes += 1
        elif byte_class is ByteClass.HIGH:
            self.high_bytes += 1
        else:
            self.control_bytes += 1

    def update_chunk(self, chunk: bytes) -> None:
        """Fold every byte of a chunk into the statistics, in order."""
        for b in chunk:
            self.update(b)

    def reset(self) -> None:
        """Reset all statistics to their initial state."""
        self.total_bytes = 0
        self.null_bytes = 0
        self.printable_bytes = 0
        self.high_bytes = 0
        self.control_bytes = 0
        self.value_counts = _empty_counts()

    @property
    def unique_count(self) -> int:
        """Number of distinct byte values seen (0-256)."""
        return sum(1 for count in self.value_counts if count)

    def percentage(self, count: int) -> float:
        """Return count as a percentage of all bytes seen.

        Returns 0.0 when no bytes have been seen.
        """
        if self.total_bytes == 0:
            return 0.0
        return count / self.total_bytes * 100.0

    @property
    def entropy_estimate(self) -> float:
        """Rough entropy estimate in bits per byte.

        This is ``unique_count / 256 * 8``, a heuristic based only on how
        many distinct values appeared. It is not Shannon entropy; see
        ``shannon_entropy`` for that.
        """
        if self.total_bytes == 0:
            return 0.0
        return self.unique_count / 256 * 8

    @property
    def shannon_entropy(self) -> float:
        """Shannon entropy of the byte distribution in bits per byte (0-8)."""
        if self.total_bytes == 0:
            return 0.0

        entropy = 0.0
        for count in self.value_counts:
            if count:
                probability = count / self.total_bytes
                entropy -= probability * math.log2(probability)
        return entropy

    def report(self) -> StatsReport:
        """Build the end-of-run summary.

        Returns:
            A StatsReport snapshot of the current counters.
        """
        return StatsReport(
            total_bytes=self.total_bytes,
            unique_bytes=self.unique_count,
            null_bytes=self.null_bytes,
            printable_bytes=self.printable_bytes,
            high_bytes=self.high_bytes,
            control_bytes=self.control_bytes,
            null_percent=self.percentage(self.null_bytes),
            printable_percent=self.percentage(self.printable_bytes),
            high_percent=self.percentage(self.high_bytes),
            control_percent=self.percentage(self.control_bytes),
            entropy_estimate=self.entropy_estimate,
            shannon_entropy=self.shannon_entropy,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert statistics to a dictionary representation.

        Returns:
            Dictionary with all report fields.
        """
        return self.report().model_dump()
