"""Line formatting for hexdump output.

Renders one chunk of bytes as a single hexdump line made of an offset
column, hex columns split in two halves, and an ASCII gutter. Lines are
built as Rich ``Text`` objects so color is carried as styles rather
than inline escape sequences; ``Text.plain`` gives the undecorated line.

Example output (16 bytes per line, no color)::

    00000000  7f 45 4c 46 02 01 01 00  00 00 00 00 00 00 00 00  |.ELF............|
    00000010  03 00 3e 00                                       |..>.            |
"""

from __future__ import annotations

from rich.text import Text

from hexprobe.core.classify import OFFSET_STYLE, ByteClass, classify, color_for
from hexprobe.core.models import RenderConfig

# Index after which the half-line separator is emitted
HALF_LINE_INDEX = 7

# Width of one rendered byte: two hex digits and a space
CELL_WIDTH = 3


def decorate(text: str, style: str, enabled: bool) -> Text:
    """Wrap text in a style when color is enabled.

    Args:
        text: The text to decorate.
        style: Rich style name to apply.
        enabled: Whether color output is enabled.

    Returns:
        A styled Text when enabled, an unstyled one otherwise.
    """
    if enabled:
        return Text(text, style=style)
    return Text(text)


def format_line(offset: int, chunk: bytes, config: RenderConfig) -> Text:
    """Format a single line of hexdump output.

    Short chunks (the final line of input) are padded so that every line
    has the same width for a given configuration.

    Args:
        offset: Absolute offset of the first byte in the chunk.
        chunk: Between 0 and ``config.bytes_per_line`` bytes.
        config: Rendering configuration.

    Returns:
        Rich Text holding the formatted line, without a trailing newline.

    Raises:
        ValueError: If the chunk is longer than ``config.bytes_per_line``.
    """
    width = config.bytes_per_line
    if len(chunk) > width:
        raise ValueError(f"chunk of {len(chunk)} bytes exceeds {width} bytes per line")

    color = config.color_enabled
    hex_format = "{:02X}" if config.uppercase_hex else "{:02x}"
    classes = [classify(b) for b in chunk]

    line = Text()

    if config.show_offset:
        line.append_text(decorate(f"{offset:08x}", OFFSET_STYLE, color))
        line.append("  ")

    for i, (b, byte_class) in enumerate(zip(chunk, classes)):
        line.append_text(decorate(hex_format.format(b), color_for(byte_class), color))
        line.append(" ")
        if i == HALF_LINE_INDEX:
            line.append(" ")

    # Pad the hex area of a short line
    for i in range(width - len(chunk)):
        line.append(" " * CELL_WIDTH)
        if len(chunk) + i == HALF_LINE_INDEX:
            line.append(" ")

    if config.show_ascii:
        line.append(" |")
        for b, byte_class in zip(chunk, classes):
            char = chr(b) if byte_class is ByteClass.PRINTABLE else "."
            line.append_text(decorate(char, color_for(byte_class), color))
        line.append(" " * (width - len(chunk)))
        line.append("|")

    return line


def line_width(config: RenderConfig) -> int:
    """Return the plain-text width of every line rendered with a config.

    Assumes offsets fit in eight hex digits.
    """
    width = config.bytes_per_line * CELL_WIDTH
    if config.bytes_per_line > HALF_LINE_INDEX:
        width += 1
    if config.show_offset:
        width += 10
    if config.show_ascii:
        width += config.bytes_per_line + 3
    return width
