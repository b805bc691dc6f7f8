"""Tests for hexprobe logging configuration.

Verifies that logging is configured with a Rich handler on stderr,
appropriate log levels, and no duplicate handlers.
"""

from __future__ import annotations

import io
import logging

from rich.logging import RichHandler

from hexprobe.core.driver import BufferSink, StreamDriver
from hexprobe.core.logging import setup_logging
from hexprobe.core.models import RenderConfig


class TestSetupLogging:
    """Tests for the setup_logging function."""

    def test_returns_logger_instance(self) -> None:
        assert isinstance(setup_logging(), logging.Logger)

    def test_logger_name_is_hexprobe(self) -> None:
        assert setup_logging().name == "hexprobe"

    def test_verbose_false_sets_warning_level(self) -> None:
        assert setup_logging(verbose=False).level == logging.WARNING

    def test_verbose_true_sets_debug_level(self) -> None:
        assert setup_logging(verbose=True).level == logging.DEBUG

    def test_has_rich_handler_on_stderr(self) -> None:
        logger = setup_logging()
        handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        assert len(handlers) == 1
        assert handlers[0].console.stderr is True

    def test_no_duplicate_handlers_on_multiple_calls(self) -> None:
        setup_logging(verbose=False)
        setup_logging(verbose=True)
        logger = setup_logging(verbose=False)
        assert len(logger.handlers) == 1

    def test_propagate_is_disabled(self) -> None:
        assert setup_logging().propagate is False

    def test_level_name(self) -> None:
        assert setup_logging(level="info").level == logging.INFO

    def test_verbose_overrides_level_name(self) -> None:
        assert setup_logging(verbose=True, level="error").level == logging.DEBUG


class TestDriverLogging:
    """Tests for debug messages from the stream driver."""

    def test_driver_logs_seek_and_completion(self, caplog) -> None:
        logger = setup_logging(verbose=True)
        logger.propagate = True
        try:
            with caplog.at_level(logging.DEBUG, logger="hexprobe"):
                driver = StreamDriver(RenderConfig(start_offset=4, color_enabled=False))
                driver.dump(io.BytesIO(bytes(32)), BufferSink())
        finally:
            logger.propagate = False

        messages = [record.getMessage() for record in caplog.records]
        assert "Seeked to offset 0x4" in messages
        assert "Finished after 28 bytes" in messages
