"""Command lines for the project generator and package manager."""

from __future__ import annotations

from .config import BootstrapConfig
from .process import Command
from .templates import TemplateSet

__all__ = [
    "GENERATOR_FLAGS",
    "GENERATOR_PACKAGE",
    "LOGGING_PACKAGES",
    "PINNED_RUNTIME_PACKAGES",
    "extra_install_commands",
    "generator_command",
    "install_commands",
]


GENERATOR_PACKAGE = "create-next-app@latest"
GENERATOR_FLAGS: tuple[str, ...] = (
    "--typescript",
    "--eslint",
    "--use-npm",
    "--tailwind",
    "--src-dir",
    "--app",
    "--no-turbopack",
    "--import-alias",
    "@/*",
)

PINNED_RUNTIME_PACKAGES: tuple[str, ...] = ("react@18", "react-dom@18")
LOGGING_PACKAGES: tuple[str, ...] = ("pino-pretty",)


def generator_command(config: BootstrapConfig) -> Command:
    """Return the ``create-next-app`` invocation for ``config``."""

    return Command(
        config.npx_executable,
        (GENERATOR_PACKAGE, config.project_name, *GENERATOR_FLAGS),
        description="Creating Next.js project...",
    )


def install_commands(config: BootstrapConfig, template_set: TemplateSet) -> list[Command]:
    """Return the package installs that must succeed, in order, before templating."""

    return [
        Command(
            config.npm_executable,
            ("install", *PINNED_RUNTIME_PACKAGES),
            description="Pinning React 18...",
        ),
        Command(
            config.npm_executable,
            ("install", *template_set.packages, "--legacy-peer-deps"),
            description="Installing dependencies: shadcn/ui, wagmi, and connectkit...",
        ),
    ]


def extra_install_commands(config: BootstrapConfig) -> list[Command]:
    """Return the installs performed after the templates are written."""

    return [
        Command(
            config.npm_executable,
            ("install", *LOGGING_PACKAGES),
            description="Installing additional dependencies...",
        )
    ]
