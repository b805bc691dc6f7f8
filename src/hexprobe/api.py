"""High-level Python API for hexprobe.

Provides simple functions for dumping and analyzing files from Python
code without going through the CLI.

Example usage::

    from hexprobe.api import analyze, hexdump

    # Get a plain hexdump as a string
    print(hexdump("/path/to/file", columns=8))

    # Dump a byte range
    print(hexdump("/path/to/file", start_offset=0x100, length_limit=64))

    # Collect statistics without rendering
    report = analyze("/path/to/file")
    print(report.shannon_entropy)
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import IO, Any, BinaryIO

from hexprobe.core.driver import DEFAULT_BUFFER_SIZE, StreamDriver, TextIOSink
from hexprobe.core.exceptions import FileOpenError
from hexprobe.core.models import RenderConfig, StatsReport
from hexprobe.core.stats import ByteStats


def open_source(file_path: str | Path) -> BinaryIO:
    """Open a file for binary reading.

    Args:
        file_path: Path to the file.

    Returns:
        An open binary file object. The caller is responsible for closing it.

    Raises:
        FileOpenError: If the path is missing, a directory, or unreadable.
    """
    path = Path(file_path)
    try:
        return path.open("rb")
    except FileNotFoundError as e:
        raise FileOpenError("File not found", path=str(path)) from e
    except IsADirectoryError as e:
        raise FileOpenError("Path is a directory", path=str(path)) from e
    except PermissionError as e:
        raise FileOpenError("Permission denied", path=str(path)) from e
    except OSError as e:
        raise FileOpenError(f"Could not open file: {e.strerror or e}", path=str(path)) from e


def _plain_config(
    columns: int = 16,
    uppercase: bool = False,
    show_ascii: bool = True,
    show_offset: bool = True,
    start_offset: int = 0,
    length_limit: int | None = None,
) -> RenderConfig:
    return RenderConfig(
        bytes_per_line=columns,
        show_ascii=show_ascii,
        show_offset=show_offset,
        uppercase_hex=uppercase,
        color_enabled=False,
        start_offset=start_offset,
        length_limit=length_limit,
    )


def hexdump_iter(
    file_path: str | Path,
    stats: ByteStats | None = None,
    **options: Any,
) -> Iterator[str]:
    """Generate plain hexdump lines lazily.

    Args:
        file_path: Path to the file to dump.
        stats: Optional accumulator updated as lines are produced.
        **options: Rendering options: ``columns`` (default 16),
            ``uppercase``, ``show_ascii``, ``show_offset``,
            ``start_offset`` and ``length_limit``.

    Yields:
        Individual hexdump lines without trailing newlines.

    Raises:
        FileOpenError: If the file cannot be opened.
        SeekError: If the start offset is beyond the end of the file.
        ReadError: If reading fails part way through.
    """
    driver = StreamDriver(_plain_config(**options))
    with open_source(file_path) as source:
        for line in driver.iter_lines(source, stats):
            yield line.plain


def hexdump(file_path: str | Path, **options: Any) -> str:
    """Generate a plain hexdump of a file.

    Accepts the same keyword options as ``hexdump_iter``.

    Returns:
        The complete hexdump, lines joined by newlines (empty for an
        empty range).

    Example output::

        00000000  48 65 6c 6c 6f                                    |Hello           |
    """
    return "\n".join(hexdump_iter(file_path, **options))


def hexdump_file(file_path: str | Path, output: str | Path | IO[str], **options: Any) -> int:
    """Write a plain hexdump to a file or text stream.

    Streams output so the input is never loaded fully into memory.

    Args:
        file_path: Path to the file to dump.
        output: Output file path or writable text stream.
        **options: Rendering options as for ``hexdump_iter``.

    Returns:
        Number of input bytes dumped.
    """
    driver = StreamDriver(_plain_config(**options))

    with open_source(file_path) as source:
        if isinstance(output, (str, Path)):
            with open(output, "w", encoding="utf-8") as f:
                return driver.dump(source, TextIOSink(f))
        return driver.dump(source, TextIOSink(output))


def analyze(
    file_path: str | Path,
    start_offset: int = 0,
    length_limit: int | None = None,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
) -> StatsReport:
    """Collect byte statistics for a file without rendering any lines.

    Args:
        file_path: Path to the file to analyze.
        start_offset: Byte offset to start from.
        length_limit: Maximum bytes to read, or None for the whole file.
        buffer_size: Read buffer size in bytes.

    Returns:
        A StatsReport for the selected range.
    """
    stats = ByteStats()
    config = RenderConfig(start_offset=start_offset, length_limit=length_limit)
    driver = StreamDriver(config, buffer_size=buffer_size)

    with open_source(file_path) as source:
        for _ in driver.iter_chunks(source, stats):
            pass

    return stats.report()
