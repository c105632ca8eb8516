"""Sequential bootstrap of a Next.js + wagmi + ConnectKit project."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable

from .commands import extra_install_commands, generator_command, install_commands
from .config import BootstrapConfig
from .envfile import WALLETCONNECT_ENV_KEY, write_env_file
from .errors import CommandError, EnvFormatError, ErrorKind, UsageError
from .process import Command, CommandRunner, SubprocessRunner
from .prompt import Ask, prompt_wallet_connect_id
from .scaffold import TemplateMaterializer
from .templates import get_template_set

__all__ = ["BootstrapResult", "Bootstrapper", "Stage"]


LOGGER = logging.getLogger(__name__)


class Stage(str, Enum):
    """Steps of a bootstrap run, in execution order."""

    AWAIT_CREDENTIAL = "await_credential"
    PROVISIONING = "provisioning"
    ENV_WRITE = "env_write"
    DEPENDENCY_INSTALL = "dependency_install"
    TEMPLATE_WRITE = "template_write"
    EXTRA_DEPENDENCY_INSTALL = "extra_dependency_install"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class BootstrapResult:
    """Outcome of :meth:`Bootstrapper.run`.

    ``stage`` is either :attr:`Stage.DONE` or :attr:`Stage.FAILED`; in the
    latter case ``failed_at`` names the stage that raised. Work completed
    before the failure is left on disk.
    """

    project_root: Path
    stage: Stage
    failed_at: Stage | None = None
    error_kind: ErrorKind | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None


class ProjectRootMissingError(OSError):
    """Raised when the generator succeeded without creating the project directory."""


class Bootstrapper:
    """Run the bootstrap stages for a :class:`BootstrapConfig`."""

    def __init__(
        self,
        runner: CommandRunner | None = None,
        materializer: TemplateMaterializer | None = None,
        ask: Ask | None = None,
    ) -> None:
        self.runner = runner or SubprocessRunner()
        self.materializer = materializer or TemplateMaterializer()
        self.ask = ask

    def run(self, config: BootstrapConfig) -> BootstrapResult:
        """Bootstrap ``config.project_root`` and report how far the run got.

        Unreadable input, failures of external commands and failures of
        filesystem writes are logged and returned as part of the result
        instead of being raised.
        """

        project_root = config.project_root
        stage = Stage.AWAIT_CREDENTIAL
        try:
            wallet_connect_id = prompt_wallet_connect_id(self.ask)

            stage = Stage.PROVISIONING
            config.parent_directory.mkdir(parents=True, exist_ok=True)
            self._run_all([generator_command(config)], cwd=config.parent_directory)
            if not project_root.is_dir():
                raise ProjectRootMissingError(f"{project_root} was not created by create-next-app")

            stage = Stage.ENV_WRITE
            write_env_file(project_root, [(WALLETCONNECT_ENV_KEY, wallet_connect_id)])

            template_set = get_template_set(config.flavor)

            stage = Stage.DEPENDENCY_INSTALL
            self._run_all(install_commands(config, template_set), cwd=project_root)

            stage = Stage.TEMPLATE_WRITE
            LOGGER.info("Setting up wagmi and ConnectKit...")
            self.materializer.materialize(project_root, template_set)

            stage = Stage.EXTRA_DEPENDENCY_INSTALL
            self._run_all(extra_install_commands(config), cwd=project_root)
        except UsageError as exc:
            return self._failed(project_root, stage, ErrorKind.USAGE, exc)
        except CommandError as exc:
            return self._failed(project_root, stage, ErrorKind.SUBPROCESS, exc)
        except (OSError, EnvFormatError) as exc:
            return self._failed(project_root, stage, ErrorKind.FILESYSTEM, exc)

        return BootstrapResult(project_root=project_root, stage=Stage.DONE)

    def _run_all(self, commands: Iterable[Command], *, cwd: Path) -> None:
        for command in commands:
            if command.description:
                LOGGER.info(command.description)
            self.runner.run(command, cwd=cwd)

    @staticmethod
    def _failed(project_root: Path, stage: Stage, kind: ErrorKind, exc: BaseException) -> BootstrapResult:
        LOGGER.error("Error during project setup (%s): %s", stage.value, exc)
        LOGGER.debug("Failure details", exc_info=exc)
        return BootstrapResult(
            project_root=project_root,
            stage=Stage.FAILED,
            failed_at=stage,
            error_kind=kind,
            error=exc,
        )
