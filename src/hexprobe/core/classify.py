"""Byte classification for hexprobe.

Every byte value maps to exactly one of five classes. The class drives
both the color used when rendering a byte and the bucket it is counted
in by the statistics accumulator.
"""

from __future__ import annotations

from enum import Enum


class ByteClass(str, Enum):
    """Semantic classes a byte value can fall into."""

    NULL = "null"
    PRINTABLE = "printable"
    WHITESPACE = "whitespace"
    HIGH = "high"
    CONTROL = "control"


# Rich style used for offsets, independent of byte class
OFFSET_STYLE = "cyan"

# Rich style for the rule above the statistics block
STATS_RULE_STYLE = "bright_black"

_CLASS_STYLES: dict[ByteClass, str] = {
    ByteClass.NULL: "bright_black",
    ByteClass.PRINTABLE: "green",
    ByteClass.WHITESPACE: "cyan",
    ByteClass.HIGH: "yellow",
    ByteClass.CONTROL: "red",
}

_WHITESPACE = frozenset((0x09, 0x0A, 0x0D))


def classify(byte: int) -> ByteClass:
    """Classify a single byte value.

    Rules are applied in order, first match wins:

    1. ``0x00`` is NULL
    2. ``0x20`` to ``0x7e`` is PRINTABLE
    3. tab, line feed and carriage return are WHITESPACE
    4. ``0x80`` and above is HIGH
    5. anything else (remaining C0 codes and ``0x7f``) is CONTROL

    Args:
        byte: Integer value in the range 0-255.

    Returns:
        The ByteClass for the value.

    Raises:
        ValueError: If the value is not a valid byte.

    Example:
        >>> classify(0x41)
        <ByteClass.PRINTABLE: 'printable'>
    """
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte value out of range: {byte!r}")
    if byte == 0:
        return ByteClass.NULL
    if 0x20 <= byte < 0x7F:
        return ByteClass.PRINTABLE
    if byte in _WHITESPACE:
        return ByteClass.WHITESPACE
    if byte >= 0x80:
        return ByteClass.HIGH
    return ByteClass.CONTROL


def color_for(byte_class: ByteClass) -> str:
    """Return the Rich style name used to render a byte class."""
    return _CLASS_STYLES[byte_class]
