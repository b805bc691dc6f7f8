"""Tests for the ByteStats accumulator."""

from __future__ import annotations

import math

import pytest

from hexprobe.core.models import StatsReport
from hexprobe.core.stats import ByteStats


class TestByteStats:
    """Tests for ByteStats counters."""

    def test_default_values(self) -> None:
        stats = ByteStats()
        assert stats.total_bytes == 0
        assert stats.null_bytes == 0
        assert stats.printable_bytes == 0
        assert stats.high_bytes == 0
        assert stats.control_bytes == 0
        assert stats.unique_count == 0
        assert len(stats.value_counts) == 256

    def test_update_single_byte(self) -> None:
        stats = ByteStats()
        stats.update(0x41)
        assert stats.total_bytes == 1
        assert stats.printable_bytes == 1
        assert stats.value_counts[0x41] == 1

    def test_whitespace_counts_as_printable(self) -> None:
        stats = ByteStats()
        stats.update_chunk(b"\t\n\r")
        assert stats.printable_bytes == 3
        assert stats.control_bytes == 0

    def test_buckets(self) -> None:
        stats = ByteStats()
        stats.update_chunk(b"\x00\x00A\x80\xff\x01\x7f")
        assert stats.null_bytes == 2
        assert stats.printable_bytes == 1
        assert stats.high_bytes == 2
        assert stats.control_bytes == 2

    def test_buckets_sum_to_total(self) -> None:
        stats = ByteStats()
        stats.update_chunk(bytes(range(256)) * 3 + b"hello\x00\x00")
        assert stats.total_bytes == (
            stats.null_bytes + stats.printable_bytes + stats.high_bytes + stats.control_bytes
        )

    def test_unique_count_is_monotonic_and_bounded(self) -> None:
        stats = ByteStats()
        previous = 0
        for value in list(range(256)) + list(range(0, 256, 3)):
            stats.update(value)
            assert previous <= stats.unique_count <= 256
            previous = stats.unique_count
        assert stats.unique_count == 256

    def test_repeated_value_counts_once(self) -> None:
        stats = ByteStats()
        stats.update_chunk(b"AAAA")
        assert stats.unique_count == 1
        assert stats.value_counts[ord("A")] == 4

    def test_update_rejects_invalid_value(self) -> None:
        with pytest.raises(ValueError):
            ByteStats().update(300)

    def test_reset_clears_all_state(self) -> None:
        stats = ByteStats()
        stats.update_chunk(b"\x00A\x80\x01")
        stats.reset()
        assert stats == ByteStats()
        assert stats.unique_count == 0


class TestPercentages:
    """Tests for percentage and entropy figures."""

    def test_percentage_of_empty_stats_is_zero(self) -> None:
        assert ByteStats().percentage(0) == 0.0

    def test_percentage(self) -> None:
        stats = ByteStats()
        stats.update_chunk(b"\x00AAA")
        assert stats.percentage(stats.null_bytes) == 25.0
        assert stats.percentage(stats.printable_bytes) == 75.0

    def test_entropy_estimate_is_heuristic(self) -> None:
        stats = ByteStats()
        stats.update_chunk(bytes(range(64)))
        assert stats.entropy_estimate == pytest.approx(64 / 256 * 8)

    def test_entropy_estimate_ignores_frequencies(self) -> None:
        """Skewed data with the same distinct values gets the same estimate."""
        balanced = ByteStats()
        balanced.update_chunk(b"AB")
        skewed = ByteStats()
        skewed.update_chunk(b"A" * 99 + b"B")
        assert balanced.entropy_estimate == skewed.entropy_estimate
        assert balanced.shannon_entropy > skewed.shannon_entropy

    def test_shannon_entropy_uniform(self) -> None:
        stats = ByteStats()
        stats.update_chunk(bytes(range(256)))
        assert stats.shannon_entropy == pytest.approx(8.0)

    def test_shannon_entropy_single_value(self) -> None:
        stats = ByteStats()
        stats.update_chunk(b"\x00" * 100)
        assert stats.shannon_entropy == 0.0

    def test_shannon_entropy_two_values(self) -> None:
        stats = ByteStats()
        stats.update_chunk(b"AB" * 50)
        assert stats.shannon_entropy == pytest.approx(1.0)

    def test_entropy_of_empty_stats_is_zero(self) -> None:
        stats = ByteStats()
        assert stats.entropy_estimate == 0.0
        assert stats.shannon_entropy == 0.0


class TestReport:
    """Tests for report() and to_dict()."""

    def test_empty_report(self) -> None:
        report = ByteStats().report()
        assert isinstance(report, StatsReport)
        assert report.total_bytes == 0
        assert report.unique_bytes == 0
        assert report.null_percent == 0.0
        assert report.printable_percent == 0.0
        assert report.high_percent == 0.0
        assert report.control_percent == 0.0

    def test_report_values(self) -> None:
        stats = ByteStats()
        stats.update_chunk(b"\x00A\n\xff")
        report = stats.report()
        assert report.total_bytes == 4
        assert report.unique_bytes == 4
        assert report.null_bytes == 1
        assert report.printable_bytes == 2
        assert report.high_bytes == 1
        assert report.null_percent == 25.0
        assert report.printable_percent == 50.0
        assert report.high_percent == 25.0
        assert report.entropy_estimate == pytest.approx(4 / 256 * 8)
        assert report.shannon_entropy == pytest.approx(2.0)

    def test_report_is_a_snapshot(self) -> None:
        stats = ByteStats()
        stats.update(0x41)
        report = stats.report()
        stats.update(0x42)
        assert report.total_bytes == 1

    def test_to_dict(self) -> None:
        stats = ByteStats()
        stats.update_chunk(b"AB")
        result = stats.to_dict()
        assert result["total_bytes"] == 2
        assert result["unique_bytes"] == 2
        assert math.isclose(result["printable_percent"], 100.0)
        assert "value_counts" not in result
