"""Writing template files into a generated project."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .templates import TemplateSet

__all__ = ["TemplateMaterializer"]


LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class TemplateMaterializer:
    """Overwrite the wallet wiring files of a Next.js project."""

    encoding: str = "utf-8"

    def ensure_directories(self, project_root: Path, template_set: TemplateSet) -> None:
        """Create every directory of ``template_set`` that does not exist yet."""

        for relative in template_set.directories:
            directory = project_root / relative
            if not directory.is_dir():
                directory.mkdir()
                LOGGER.debug("Created %s", directory)

    def materialize(self, project_root: str | Path, template_set: TemplateSet) -> list[Path]:
        """Write every file of ``template_set`` below ``project_root``.

        Existing files are replaced. Returns the written paths in template order.
        """

        root = Path(project_root)
        self.ensure_directories(root, template_set)

        written: list[Path] = []
        for relative_path, content in template_set.files.items():
            destination = root / relative_path
            destination.write_text(content, encoding=self.encoding, newline="")
            written.append(destination)
        LOGGER.debug("Wrote %d template files for the %s flavor", len(written), template_set.flavor.value)
        return written
