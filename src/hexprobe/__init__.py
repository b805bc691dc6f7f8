"""hexprobe - A binary inspection tool.

hexprobe renders files (or byte ranges within them) as formatted
hexadecimal with an adjacent ASCII column, optional color-coding of
byte classes, and optional aggregate statistics. Input is streamed in
bounded buffers, so arbitrarily large files can be inspected.
"""

__version__ = "1.0.0"
