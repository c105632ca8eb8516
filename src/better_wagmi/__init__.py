"""Bootstrap Next.js projects wired up with wagmi and ConnectKit.

The package drives ``create-next-app`` and ``npm`` through a small process
abstraction, records the WalletConnect project id in ``.env.local`` and
replaces the generated app shell with wallet aware templates. Everything is
usable programmatically via :class:`Bootstrapper` and from the command line.
"""

from __future__ import annotations

from .config import BootstrapConfig
from .errors import (
    BootstrapError,
    CommandError,
    CommandFailedError,
    CommandNotFoundError,
    EnvFormatError,
    ErrorKind,
    UsageError,
)
from .pipeline import Bootstrapper, BootstrapResult, Stage
from .process import Command, CommandRunner, SubprocessRunner
from .templates import TemplateFlavor, TemplateSet, get_template_set

__all__ = [
    "BootstrapConfig",
    "BootstrapError",
    "BootstrapResult",
    "Bootstrapper",
    "Command",
    "CommandError",
    "CommandFailedError",
    "CommandNotFoundError",
    "CommandRunner",
    "EnvFormatError",
    "ErrorKind",
    "Stage",
    "SubprocessRunner",
    "TemplateFlavor",
    "TemplateSet",
    "UsageError",
    "get_template_set",
]

__version__ = "0.1.0"
