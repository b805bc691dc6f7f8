"""Value parsers for hexprobe command-line options.

Parsers raise ArgumentError; the CLI reports it as a usage error before
any file is opened.
"""

from __future__ import annotations

from hexprobe.core.exceptions import ArgumentError

HEX_PREFIXES = ("0x", "0X")


def parse_number(value: str | int) -> int:
    """Parse a non-negative integer in base 10 or ``0x``-prefixed base 16.

    Args:
        value: The raw option value.

    Returns:
        The parsed integer.

    Raises:
        ArgumentError: If the value is not a valid non-negative number.

    Example:
        >>> parse_number("0x10")
        16
        >>> parse_number("256")
        256
    """
    text = str(value).strip()
    if len(text) > 2 and text.startswith(HEX_PREFIXES):
        digits, base = text[2:], 16
    else:
        digits, base = text, 10

    # int() would otherwise accept signs and underscores
    if not digits or not digits.isalnum() or not digits.isascii():
        raise ArgumentError(f"Invalid number: {value!r}", value=str(value))

    try:
        return int(digits, base)
    except ValueError:
        raise ArgumentError(f"Invalid number: {value!r}", value=str(value)) from None


def parse_columns(value: str | int) -> int:
    """Parse a bytes-per-line count: a positive base-10 integer.

    Raises:
        ArgumentError: If the value is not a positive decimal integer.
    """
    text = str(value).strip()
    if not text.isdigit() or not text.isascii():
        raise ArgumentError(f"Column count must be a positive integer: {value!r}", value=str(value))

    columns = int(text)
    if columns < 1:
        raise ArgumentError(f"Column count must be a positive integer: {value!r}", value=str(value))
    return columns
