"""Configuration shared by the bootstrapper and CLI."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .naming import validate_project_name
from .templates import TemplateFlavor


class BootstrapConfig(BaseModel):
    """Inputs describing a single bootstrap run.

    Attributes
    ----------
    project_name:
        Directory and npm package name handed to ``create-next-app``. The value
        is used verbatim and must be a single, npm compatible path component.
    parent_directory:
        Directory in which ``create-next-app`` is executed. The project ends up
        in :attr:`project_root`.
    flavor:
        Which wallet wiring API shape to generate.
    npx_executable / npm_executable:
        Executables used to run the project generator and to install packages.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    project_name: str = Field(..., description="Name of the generated project directory.")
    parent_directory: Path = Field(..., description="Directory the project is created in.")
    flavor: TemplateFlavor = Field(default=TemplateFlavor.MODERN, description="Template flavor to materialize.")
    npx_executable: str = Field(default="npx", description="Executable used to run the project generator.")
    npm_executable: str = Field(default="npm", description="Package manager executable.")

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        return validate_project_name(value)

    @field_validator("parent_directory")
    @classmethod
    def _absolute_directory(cls, value: Path) -> Path:
        return value.expanduser().resolve()

    @classmethod
    def from_name(
        cls,
        name: str,
        *,
        directory: str | Path | None = None,
        flavor: TemplateFlavor | str = TemplateFlavor.MODERN,
    ) -> "BootstrapConfig":
        """Build a :class:`BootstrapConfig` for ``name`` inside ``directory``.

        ``directory`` defaults to the current working directory.
        """

        return cls(
            project_name=name,
            parent_directory=Path(directory) if directory is not None else Path.cwd(),
            flavor=TemplateFlavor(flavor),
        )

    @property
    def project_root(self) -> Path:
        """Absolute path of the project created by the generator."""

        return self.parent_directory / self.project_name


__all__ = ["BootstrapConfig"]
