"""Command-line interface for hexprobe.

This module provides the Typer-based CLI that resolves options into a
RenderConfig, opens the target file, and streams its hexdump to stdout.
"""

from pathlib import Path
from typing import Annotated, Callable, Optional

import typer
from rich.console import Console

from hexprobe import __version__
from hexprobe.api import open_source
from hexprobe.cli.errors import display_error
from hexprobe.cli.options import parse_columns, parse_number
from hexprobe.config import load_config
from hexprobe.config.env import get_env_var_docs
from hexprobe.core.driver import ConsoleSink, StreamDriver
from hexprobe.core.exceptions import ArgumentError, HexprobeError
from hexprobe.core.logging import setup_logging
from hexprobe.core.report import render_banner, render_file_header, render_stats
from hexprobe.core.stats import ByteStats

# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1

EXAMPLES = """\
Examples:

    hexprobe binary.exe

    hexprobe -c 32 firmware.bin

    hexprobe -s 0x100 -n 256 file.dat

    hexprobe --stats malware.bin
"""

ENVIRONMENT = "Environment:\n\n" + "\n\n".join(
    f"    {name}: {doc}" for name, doc in get_env_var_docs().items()
)

# Initialize Typer app and Rich consoles
app = typer.Typer(
    name="hexprobe",
    help="hexprobe - Binary analysis and hex viewer.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console(highlight=False)
error_console = Console(stderr=True)


def _usage_parser(func: Callable[[str], int]) -> Callable[[str], int]:
    """Wrap a value parser so ArgumentError becomes a Typer usage error."""

    def parse(value: str) -> int:
        try:
            return func(value)
        except ArgumentError as e:
            raise typer.BadParameter(e.message) from e

    return parse


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold cyan]hexprobe[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.command(epilog=EXAMPLES + "\n" + ENVIRONMENT)
def dump(
    ctx: typer.Context,
    files: Annotated[
        Optional[list[str]],
        typer.Argument(
            metavar="FILE",
            help="File to dump (if several are given, the last one wins)",
            show_default=False,
        ),
    ] = None,
    columns: Annotated[
        Optional[int],
        typer.Option(
            "--columns",
            "-c",
            parser=_usage_parser(parse_columns),
            metavar="N",
            help="Bytes per line (default: 16)",
            show_default=False,
        ),
    ] = None,
    skip: Annotated[
        int,
        typer.Option(
            "--skip",
            "-s",
            parser=_usage_parser(parse_number),
            metavar="N",
            help="Skip N bytes from start (decimal or 0x hex)",
        ),
    ] = 0,
    length: Annotated[
        Optional[int],
        typer.Option(
            "--length",
            "-n",
            parser=_usage_parser(parse_number),
            metavar="N",
            help="Read only N bytes (decimal or 0x hex)",
            show_default=False,
        ),
    ] = None,
    uppercase: Annotated[
        bool,
        typer.Option("--uppercase", "-u", help="Uppercase hex"),
    ] = False,
    no_ascii: Annotated[
        bool,
        typer.Option("--no-ascii", "-A", help="Hide ASCII column"),
    ] = False,
    no_offset: Annotated[
        bool,
        typer.Option("--no-offset", "-O", help="Hide offset column"),
    ] = False,
    no_color: Annotated[
        bool,
        typer.Option(
            "--no-color",
            help="Disable colors (colors are only written to a terminal unless --force-color)",
        ),
    ] = False,
    force_color: Annotated[
        bool,
        typer.Option("--force-color", help="Write colors even when stdout is not a terminal"),
    ] = False,
    stats: Annotated[
        bool,
        typer.Option("--stats", help="Show statistics"),
    ] = False,
    config_file: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            help="Path to a configuration file",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging on stderr"),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """Render a file as hexadecimal with an ASCII column.

    Bytes are color-coded by class: null (gray), printable (green),
    whitespace (cyan), high-bit (yellow) and control (red).

    Exit codes:
        0: Success (or no file given)
        1: The file could not be opened, seeked or read
        2: Invalid command-line arguments
    """
    setup_logging(verbose=verbose)

    if not files:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=EXIT_SUCCESS)

    path = files[-1]

    cli_args = {
        "columns": columns,
        "uppercase": True if uppercase else None,
        "show_ascii": False if no_ascii else None,
        "show_offset": False if no_offset else None,
        "color": False if no_color else None,
    }

    try:
        config = load_config(config_path=config_file, cli_args=cli_args)
        render_config = config.to_render_config(start_offset=skip, length_limit=length)
        driver = StreamDriver(render_config, buffer_size=config.reader.buffer_size)
    except HexprobeError as e:
        display_error(e, error_console)
        raise typer.Exit(code=EXIT_ERROR) from None

    setup_logging(verbose=verbose, level=config.log_level.value)

    byte_stats = ByteStats() if stats else None
    out = Console(highlight=False, force_terminal=True) if force_color else console
    sink = ConsoleSink(out)

    try:
        with open_source(path) as source:
            driver.seek(source)

            for line in render_banner():
                sink.write_line(line)
            for line in render_file_header(path):
                sink.write_line(line)

            driver.dump(source, sink, byte_stats, seek=False)
    except HexprobeError as e:
        display_error(e, error_console)
        raise typer.Exit(code=EXIT_ERROR) from None
    except KeyboardInterrupt:
        error_console.print("\n[yellow]Interrupted by user[/yellow]")
        raise typer.Exit(code=EXIT_ERROR) from None

    if byte_stats is not None:
        for line in render_stats(byte_stats.report(), color=render_config.color_enabled):
            sink.write_line(line)

    raise typer.Exit(code=EXIT_SUCCESS)


def run_cli() -> None:
    """Entry point for the ``hexprobe`` console script."""
    app()


if __name__ == "__main__":
    run_cli()
