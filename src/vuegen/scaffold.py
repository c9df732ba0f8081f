"""Write the generated component files to disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from .config import ComponentConfig
from .errors import ComponentExistsError, GenerationIOError
from .filesystem import FileSystem, LocalFileSystem
from .schema import GenerationReport
from .templates import component_files

__all__ = ["ComponentScaffolder", "Reporter"]


LOGGER = logging.getLogger(__name__)

Reporter = Callable[[str, str], None]
"""Receives ``("directory", folder_name)`` and ``("file", filename)`` events."""


def _ignore(kind: str, value: str) -> None:
    return None


@dataclass(slots=True)
class ComponentScaffolder:
    """Create a component directory and its three boilerplate files."""

    filesystem: FileSystem
    reporter: Reporter

    def __init__(self, filesystem: FileSystem | None = None, reporter: Reporter | None = None) -> None:
        self.filesystem = filesystem or LocalFileSystem()
        self.reporter = reporter or _ignore

    def create(self, config: ComponentConfig) -> GenerationReport:
        """Emit the component described by ``config``.

        Raises :class:`ComponentExistsError` without writing anything when the
        target directory is already present. Any ``OSError`` raised while
        creating the directory or writing a file is re-raised as
        :class:`GenerationIOError`; files written before the failure are left
        in place.
        """

        target = config.target_directory
        if self.filesystem.exists(target):
            raise ComponentExistsError(config.folder_name)

        files = component_files(config.name, config.language)
        created: list[str] = []
        self._guarded(self.filesystem.make_directory, target, config.name, created)
        LOGGER.debug("Created directory %s", target)
        self.reporter("directory", config.folder_name)

        for generated in files:
            self._guarded(
                lambda path: self.filesystem.write_text(path, generated.content),
                target / generated.filename,
                config.name,
                created,
            )
            LOGGER.debug("Wrote %s (%d bytes)", generated.filename, len(generated.content))
            created.append(generated.filename)
            self.reporter("file", generated.filename)

        return GenerationReport(
            component=config.name,
            folder_name=config.folder_name,
            directory=target,
            language=config.language,
            files=created,
        )

    @staticmethod
    def _guarded(operation: Callable[[Path], None], path: Path, name: str, created: list[str]) -> None:
        try:
            operation(path)
        except OSError as exc:
            LOGGER.debug("Generation of %s failed after %d file(s)", name, len(created))
            raise GenerationIOError(str(exc)) from exc
