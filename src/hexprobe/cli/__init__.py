# CLI module for hexprobe
"""hexprobe CLI - Command-line interface for the hexprobe tool."""

from hexprobe.cli.main import app, run_cli

__all__ = ["app", "run_cli"]
