"""Custom exception hierarchy for hexprobe.

This module defines the exception classes used throughout hexprobe
for error handling and reporting. All exceptions inherit from the
base HexprobeError class, allowing callers to catch all hexprobe
errors with a single except clause.
"""

from __future__ import annotations


class HexprobeError(Exception):
    """Base exception for all hexprobe errors.

    Attributes:
        message: Human-readable error message.
        context: Optional dictionary of additional context about the error.
    """

    def __init__(self, message: str, context: dict | None = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message.
            context: Optional dictionary of additional context about the error.
        """
        self.message = message
        self.context = context or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including context if present."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ArgumentError(HexprobeError, ValueError):
    """Exception raised for a malformed command-line value.

    Also a ValueError so that Typer reports it as a usage error
    before any file I/O happens.

    Example:
        >>> raise ArgumentError("Invalid number", option="--skip", value="0xZZ")
    """

    def __init__(
        self,
        message: str,
        option: str | None = None,
        value: str | None = None,
        context: dict | None = None,
    ):
        """Initialize the argument error.

        Args:
            message: Human-readable error message.
            option: The option whose value was rejected.
            value: The rejected value.
            context: Optional dictionary of additional context.
        """
        ctx = context or {}
        if option:
            ctx["option"] = option
        if value is not None:
            ctx["value"] = value
        super().__init__(message, ctx)
        self.option = option
        self.value = value


class ConfigError(HexprobeError):
    """Exception raised for configuration errors.

    Example:
        >>> raise ConfigError("Invalid column count", config_key="display.columns")
    """

    def __init__(self, message: str, config_key: str | None = None, context: dict | None = None):
        """Initialize the config error.

        Args:
            message: Human-readable error message.
            config_key: The configuration key that caused the error.
            context: Optional dictionary of additional context.
        """
        ctx = context or {}
        if config_key:
            ctx["config_key"] = config_key
        super().__init__(message, ctx)
        self.config_key = config_key


class FileOpenError(HexprobeError):
    """Exception raised when the input file cannot be opened.

    Covers missing paths, directories, and permission problems.

    Example:
        >>> raise FileOpenError("No such file", path="/nonexistent.bin")
    """

    def __init__(self, message: str, path: str | None = None, context: dict | None = None):
        """Initialize the file open error.

        Args:
            message: Human-readable error message.
            path: The path that could not be opened.
            context: Optional dictionary of additional context.
        """
        ctx = context or {}
        if path:
            ctx["path"] = path
        super().__init__(message, ctx)
        self.path = path


class SeekError(HexprobeError):
    """Exception raised when the start offset cannot be reached.

    Example:
        >>> raise SeekError("Offset beyond end of input", offset=4096)
    """

    def __init__(self, message: str, offset: int | None = None, context: dict | None = None):
        """Initialize the seek error.

        Args:
            message: Human-readable error message.
            offset: The requested start offset.
            context: Optional dictionary of additional context.
        """
        ctx = context or {}
        if offset is not None:
            ctx["offset"] = offset
        super().__init__(message, ctx)
        self.offset = offset


class ReadError(HexprobeError):
    """Exception raised when reading fails part way through the input.

    Lines rendered before the failure remain valid output.

    Example:
        >>> raise ReadError("Input/output error", offset=8192)
    """

    def __init__(self, message: str, offset: int | None = None, context: dict | None = None):
        """Initialize the read error.

        Args:
            message: Human-readable error message.
            offset: Absolute offset at which the read failed.
            context: Optional dictionary of additional context.
        """
        ctx = context or {}
        if offset is not None:
            ctx["offset"] = offset
        super().__init__(message, ctx)
        self.offset = offset
