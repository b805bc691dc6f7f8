# Core module for hexprobe

from hexprobe.core.classify import (
    OFFSET_STYLE,
    ByteClass,
    classify,
    color_for,
)
from hexprobe.core.driver import (
    BufferSink,
    ConsoleSink,
    LineSink,
    StreamDriver,
    TextIOSink,
)
from hexprobe.core.formatter import decorate, format_line, line_width
from hexprobe.core.models import RenderConfig, StatsReport
from hexprobe.core.stats import ByteStats
