"""Command line interface for create-better-wagmi."""

from __future__ import annotations

import argparse
import logging
import sys
from enum import IntEnum
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from .config import BootstrapConfig
from .errors import ErrorKind, UsageError
from .pipeline import Bootstrapper, BootstrapResult
from .process import CommandRunner
from .prompt import Ask
from .templates import TemplateFlavor


class ExitCode(IntEnum):
    OK = 0
    USAGE = 1
    SUBPROCESS_FAILURE = 3
    FILESYSTEM_FAILURE = 4


_EXIT_CODES = {
    ErrorKind.USAGE: ExitCode.USAGE,
    ErrorKind.SUBPROCESS: ExitCode.SUBPROCESS_FAILURE,
    ErrorKind.FILESYSTEM: ExitCode.FILESYSTEM_FAILURE,
}

NEXT_STEPS = """Project setup complete!

Next steps:
  1. cd {name}
  2. npm run dev
  3. Customize your project as needed.

Your WalletConnect Project ID has been added to .env.local
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-better-wagmi",
        description="Bootstrap a Next.js dApp wired up with wagmi and ConnectKit",
    )
    # Optional here so a missing name can be reported with exit status 1.
    parser.add_argument("name", nargs="?", help="Name of the project directory to create")
    parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=None,
        help="Directory in which the project is created (defaults to the current directory)",
    )
    parser.add_argument(
        "--flavor",
        choices=[flavor.value for flavor in TemplateFlavor],
        default=TemplateFlavor.MODERN.value,
        help="wagmi API shape of the generated provider (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(message)s")


def _validation_message(exc: ValidationError) -> str:
    messages = []
    for error in exc.errors():
        cause = error.get("ctx", {}).get("error")
        messages.append(str(cause) if cause is not None else error["msg"])
    return "; ".join(messages)


def _load_config(args: argparse.Namespace) -> BootstrapConfig:
    if not args.name:
        raise UsageError("Please provide a project name.")
    try:
        return BootstrapConfig.from_name(args.name, directory=args.directory, flavor=args.flavor)
    except ValidationError as exc:
        raise UsageError(_validation_message(exc)) from exc


def exit_code_for(result: BootstrapResult) -> int:
    """Map a :class:`BootstrapResult` onto the process exit status."""

    if result.error_kind is None:
        return ExitCode.OK
    return _EXIT_CODES[result.error_kind]


def main(
    argv: Sequence[str] | None = None,
    *,
    runner: CommandRunner | None = None,
    ask: Ask | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = _load_config(args)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        parser.print_usage(sys.stderr)
        return ExitCode.USAGE

    result = Bootstrapper(runner=runner, ask=ask).run(config)
    if result.ok:
        print(NEXT_STEPS.format(name=config.project_name))
    return exit_code_for(result)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
