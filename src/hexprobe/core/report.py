"""Header and statistics rendering for hexprobe output."""

from __future__ import annotations

from rich.text import Text

from hexprobe.core.classify import STATS_RULE_STYLE
from hexprobe.core.formatter import decorate
from hexprobe.core.models import StatsReport

BANNER_WIDTH = 68
BANNER_TITLE = "hexprobe - Binary Analysis Tool"
RULE_WIDTH = 43
LABEL_WIDTH = 17


def render_banner() -> list[Text]:
    """Return the boxed banner printed before every dump."""
    inner = BANNER_WIDTH - 2
    return [
        Text(""),
        Text("╔" + "═" * inner + "╗"),
        Text("║" + BANNER_TITLE.center(inner) + "║"),
        Text("╚" + "═" * inner + "╝"),
    ]


def render_file_header(path: str) -> list[Text]:
    """Return the ``File:`` line and the blank line that follows it."""
    return [Text(f"File: {path}"), Text("")]


def _row(label: str, value: str) -> Text:
    return Text(f"{label:<{LABEL_WIDTH}}{value}")


def render_stats(report: StatsReport, color: bool = True) -> list[Text]:
    """Render the statistics block.

    Args:
        report: Summary produced at the end of a run.
        color: Whether to style the separator rule.

    Returns:
        Lines of the statistics block, starting with a blank line.
    """
    return [
        Text(""),
        decorate("═" * RULE_WIDTH, STATS_RULE_STYLE, color),
        _row("Total bytes:", f"{report.total_bytes}"),
        _row("Unique bytes:", f"{report.unique_bytes}/256"),
        _row("Null bytes:", f"{report.null_bytes} ({report.null_percent:.1f}%)"),
        _row("Printable:", f"{report.printable_bytes} ({report.printable_percent:.1f}%)"),
        _row("High bytes:", f"{report.high_bytes} ({report.high_percent:.1f}%)"),
        _row("Control bytes:", f"{report.control_bytes} ({report.control_percent:.1f}%)"),
        _row("Entropy (est.):", f"{report.entropy_estimate:.2f} bits/byte"),
        _row("Shannon entropy:", f"{report.shannon_entropy:.2f} bits/byte"),
    ]
