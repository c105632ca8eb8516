"""Blocking execution of external commands."""

from __future__ import annotations

import logging
import shutil
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from .errors import CommandFailedError, CommandNotFoundError

__all__ = ["Command", "CommandRunner", "SubprocessRunner"]


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Command:
    """An executable plus its arguments."""

    executable: str
    args: tuple[str, ...] = ()
    description: str = field(default="", compare=False)

    @property
    def argv(self) -> list[str]:
        return [self.executable, *self.args]

    def __str__(self) -> str:
        return " ".join(self.argv)


class CommandRunner(ABC):
    """Interface used by the bootstrapper to run external tools."""

    @abstractmethod
    def run(self, command: Command, *, cwd: Path) -> None:
        """Run ``command`` inside ``cwd`` and block until it exits.

        Implementations raise :class:`~better_wagmi.errors.CommandError` when the
        command cannot be started or exits with a non-zero status, and
        :class:`OSError` when ``cwd`` is not a directory.
        """


class SubprocessRunner(CommandRunner):
    """Run commands with :func:`subprocess.run`, sharing the terminal with the child.

    Standard input, output and error are inherited so that interactive
    questions asked by ``create-next-app`` or ``npm`` reach the operator.
    """

    def run(self, command: Command, *, cwd: Path) -> None:
        if not Path(cwd).is_dir():
            raise NotADirectoryError(f"working directory {cwd} does not exist")

        executable = shutil.which(command.executable)
        if executable is None:
            raise CommandNotFoundError(command.argv)

        LOGGER.debug("Running %s in %s", command, cwd)
        try:
            completed = subprocess.run([executable, *command.args], cwd=cwd, check=False)
        except FileNotFoundError as exc:
            raise CommandNotFoundError(command.argv) from exc

        if completed.returncode != 0:
            raise CommandFailedError(command.argv, completed.returncode)
