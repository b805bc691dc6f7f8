"""Allow running hexprobe with ``python -m hexprobe``."""

from hexprobe.cli.main import run_cli

if __name__ == "__main__":
    run_cli()
