"""Error reporting for the hexprobe CLI.

Renders hexprobe errors as Rich panels with a short hint about how to
fix the problem.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from hexprobe.core.exceptions import (
    ConfigError,
    FileOpenError,
    HexprobeError,
    ReadError,
    SeekError,
)


@dataclass
class ErrorContext:
    """Context for error messages."""

    title: str
    detail_label: str | None = None
    detail: str | None = None
    hint: str | None = None


# Hints keyed by error type
CONTEXT_HINTS: dict[type[HexprobeError], str] = {
    FileOpenError: "Check that the path exists and is a readable file.",
    SeekError: "Use a --skip value no larger than the file size.",
    ReadError: "Output above this message is valid up to the failing offset.",
    ConfigError: "Check the config file and HEXPROBE_* environment variables.",
}


def get_context_hint(error: HexprobeError) -> str | None:
    """Return a hint for an error, or None if there is none."""
    for error_type, hint in CONTEXT_HINTS.items():
        if isinstance(error, error_type):
            return hint
    return None


def build_error_context(error: HexprobeError) -> ErrorContext:
    """Describe an error for display."""
    hint = get_context_hint(error)
    if isinstance(error, FileOpenError):
        return ErrorContext("File Open Error", "Path", error.path, hint)
    if isinstance(error, SeekError):
        return ErrorContext("Seek Error", "Offset", _format_offset(error.offset), hint)
    if isinstance(error, ReadError):
        return ErrorContext("Read Error", "Offset", _format_offset(error.offset), hint)
    if isinstance(error, ConfigError):
        return ErrorContext("Configuration Error", "Config key", error.config_key, hint)
    return ErrorContext("Error", hint=hint)


def _format_offset(offset: int | None) -> str | None:
    if offset is None:
        return None
    return f"{offset} (0x{offset:x})"


def format_error_with_context(message: str, context: ErrorContext) -> str:
    """Format an error message with its detail and hint as Rich markup.

    Args:
        message: The base error message.
        context: Context describing the error.

    Returns:
        A markup string for the body of an error panel.
    """
    parts = [f"[bold red]{context.title}[/bold red]\n\n{escape(message)}"]

    if context.detail_label and context.detail:
        parts.append(f"\n\n[dim]{context.detail_label}:[/dim] {escape(context.detail)}")
    if context.hint:
        parts.append(f"\n[dim]Hint:[/dim] {context.hint}")

    return "".join(parts)


def display_error(error: Exception, console: Console) -> None:
    """Display an error with rich formatting.

    Args:
        error: The exception to display.
        console: Console to print the panel on (normally stderr).
    """
    if isinstance(error, HexprobeError):
        context = build_error_context(error)
        body = format_error_with_context(error.message, context)
    else:
        context = ErrorContext("Error")
        body = format_error_with_context(str(error), context)

    console.print(Panel(body, title=f"[red]{context.title}[/red]", border_style="red"))
