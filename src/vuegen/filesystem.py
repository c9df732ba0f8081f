"""Filesystem access used by the component scaffolder."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class FileSystem(ABC):
    """Minimal set of disk operations needed to emit a component."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Return ``True`` when ``path`` is present."""

    @abstractmethod
    def make_directory(self, path: Path) -> None:
        """Create ``path``. Fails when it exists or its parent is missing."""

    @abstractmethod
    def write_text(self, path: Path, content: str) -> None:
        """Write ``content`` to ``path``, replacing any previous file."""


class LocalFileSystem(FileSystem):
    """:class:`FileSystem` backed by the local disk."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def make_directory(self, path: Path) -> None:
        Path(path).mkdir()

    def write_text(self, path: Path, content: str) -> None:
        Path(path).write_text(content, encoding=self._encoding)


__all__ = ["FileSystem", "LocalFileSystem"]
