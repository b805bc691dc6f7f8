"""Stream driver for hexdump rendering.

The driver pulls bounded buffers from a binary source, slices them into
display-width chunks and hands each chunk to the line formatter and,
when requested, the statistics accumulator. Memory use is bounded by the
buffer size no matter how large the input is.

Example::

    from rich.console import Console
    from hexprobe.core import ByteStats, ConsoleSink, RenderConfig, StreamDriver

    stats = ByteStats()
    driver = StreamDriver(RenderConfig(bytes_per_line=16))
    with open("firmware.bin", "rb") as f:
        driver.dump(f, ConsoleSink(Console()), stats)
    print(stats.report())
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterator
from typing import BinaryIO, Protocol, TextIO

from rich.console import Console
from rich.text import Text

from hexprobe.core.exceptions import ReadError, SeekError
from hexprobe.core.formatter import format_line
from hexprobe.core.models import RenderConfig
from hexprobe.core.stats import ByteStats

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 4096


class LineSink(Protocol):
    """Anything that accepts rendered lines, one at a time."""

    def write_line(self, line: Text) -> None:
        """Consume a single rendered line."""
        ...


class ConsoleSink:
    """Sink that prints lines to a Rich console.

    Lines are never wrapped, so wide configurations stay aligned even
    on narrow terminals.
    """

    def __init__(self, console: Console) -> None:
        self.console = console

    def write_line(self, line: Text) -> None:
        self.console.print(line, soft_wrap=True)


class TextIOSink:
    """Sink that writes undecorated lines to a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def write_line(self, line: Text) -> None:
        self.stream.write(line.plain + "\n")


class BufferSink:
    """In-memory sink that keeps every line it receives."""

    def __init__(self) -> None:
        self.lines: list[Text] = []

    def write_line(self, line: Text) -> None:
        self.lines.append(line)

    @property
    def plain_lines(self) -> list[str]:
        """The collected lines without styling."""
        return [line.plain for line in self.lines]

    def getvalue(self) -> str:
        """Return all collected lines as newline-terminated plain text."""
        return "".join(f"{line}\n" for line in self.plain_lines)


class StreamDriver:
    """Reads a binary source and renders it line by line.

    Attributes:
        config: Rendering configuration for the run.
        capacity: Size of each read, a whole number of lines.
        bytes_consumed: Bytes read and rendered so far in the current run.
    """

    def __init__(self, config: RenderConfig, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        """Initialize the driver.

        Args:
            config: Rendering configuration.
            buffer_size: Upper bound on the size of each read. Rounded down
                to a multiple of ``config.bytes_per_line``, and never less
                than one line.

        Raises:
            ValueError: If buffer_size is not positive.
        """
        if buffer_size < 1:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.config = config
        lines_per_buffer = max(buffer_size // config.bytes_per_line, 1)
        self.capacity = lines_per_buffer * config.bytes_per_line
        self.bytes_consumed = 0

    def seek(self, source: BinaryIO) -> None:
        """Position the source at the configured start offset.

        Raises:
            SeekError: If the source cannot seek or is shorter than the offset.
        """
        offset = self.config.start_offset
        if offset == 0:
            return

        try:
            if not source.seekable():
                raise SeekError("Input does not support seeking", offset=offset)
            size = source.seek(0, io.SEEK_END)
            if offset > size:
                raise SeekError(
                    "Start offset is beyond the end of input",
                    offset=offset,
                    context={"size": size},
                )
            source.seek(offset, io.SEEK_SET)
        except OSError as e:
            raise SeekError(f"Failed to seek: {e}", offset=offset) from e

        logger.debug("Seeked to offset 0x%x", offset)

    def iter_chunks(
        self,
        source: BinaryIO,
        stats: ByteStats | None = None,
        *,
        seek: bool = True,
    ) -> Iterator[tuple[int, bytes]]:
        """Yield display-width chunks for the configured range of a source.

        Each chunk is folded into ``stats`` (when given) before it is
        yielded, so statistics always cover exactly the chunks produced.

        Args:
            source: Binary file-like object to read from.
            stats: Optional accumulator to update with every byte read.
            seek: Whether to seek to the start offset first. Pass False
                when ``seek()`` has already been called on the source.

        Yields:
            Tuples of (absolute offset, chunk bytes), in file order.

        Raises:
            SeekError: If the start offset cannot be reached.
            ReadError: If reading fails part way through.
        """
        width = self.config.bytes_per_line
        start = self.config.start_offset
        remaining = self.config.length_limit
        self.bytes_consumed = 0

        if seek:
            self.seek(source)
        logger.debug("Reading with a %d byte buffer", self.capacity)

        while remaining is None or remaining > 0:
            to_read = self.capacity if remaining is None else min(self.capacity, remaining)
            try:
                data = source.read(to_read)
            except OSError as e:
                raise ReadError(
                    f"Failed to read input: {e}",
                    offset=start + self.bytes_consumed,
                ) from e

            if not data:
                break

            for pos in range(0, len(data), width):
                chunk = data[pos : pos + width]
                if stats is not None:
                    stats.update_chunk(chunk)
                offset = start + self.bytes_consumed
                self.bytes_consumed += len(chunk)
                yield offset, chunk

            if remaining is not None:
                remaining -= len(data)

        logger.debug("Finished after %d bytes", self.bytes_consumed)

    def iter_lines(
        self,
        source: BinaryIO,
        stats: ByteStats | None = None,
        *,
        seek: bool = True,
    ) -> Iterator[Text]:
        """Yield rendered lines for the configured range of a source.

        Arguments and errors are as for ``iter_chunks``.

        Yields:
            One Rich Text line per chunk, in file order.
        """
        for offset, chunk in self.iter_chunks(source, stats, seek=seek):
            yield format_line(offset, chunk, self.config)

    def dump(
        self,
        source: BinaryIO,
        sink: LineSink,
        stats: ByteStats | None = None,
        *,
        seek: bool = True,
    ) -> int:
        """Render the configured range of a source into a sink.

        Args:
            source: Binary file-like object to read from.
            sink: Destination for rendered lines.
            stats: Optional accumulator to update with every byte read.
            seek: Whether to seek to the start offset first.

        Returns:
            Number of bytes read and rendered.
        """
        for line in self.iter_lines(source, stats, seek=seek):
            sink.write_line(line)
        return self.bytes_consumed
