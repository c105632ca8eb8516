"""Exception types raised while bootstrapping a project."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum


class ErrorKind(str, Enum):
    """Failure categories reported by :class:`~better_wagmi.pipeline.Bootstrapper`."""

    USAGE = "usage"
    SUBPROCESS = "subprocess"
    FILESYSTEM = "filesystem"


class BootstrapError(RuntimeError):
    """Base class for failures raised by this package."""


class UsageError(BootstrapError):
    """Raised when the command line input cannot be used."""


class CommandError(BootstrapError):
    """Raised when an external command cannot complete."""

    def __init__(self, message: str, argv: Sequence[str]) -> None:
        super().__init__(message)
        self.argv = tuple(argv)


class CommandNotFoundError(CommandError):
    """Raised when the executable of a command is not on ``PATH``."""

    def __init__(self, argv: Sequence[str]) -> None:
        super().__init__(f"command not found: {argv[0]}", argv)


class CommandFailedError(CommandError):
    """Raised when a command exits with a non-zero status."""

    def __init__(self, argv: Sequence[str], returncode: int) -> None:
        super().__init__(
            f"command '{' '.join(argv)}' exited with status {returncode}",
            argv,
        )
        self.returncode = returncode


class EnvFormatError(ValueError):
    """Raised when a value cannot be represented in a dotenv file."""


__all__ = [
    "BootstrapError",
    "CommandError",
    "CommandFailedError",
    "CommandNotFoundError",
    "EnvFormatError",
    "ErrorKind",
    "UsageError",
]
