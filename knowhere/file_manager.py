"""File manager interface, a local placeholder implementation, and a holder for one."""

from __future__ import annotations

from abc import ABC, abstractmethod


class FileManager(ABC):
    """Manages index files on behalf of a storage service."""

    @abstractmethod
    def load_file(self, filename: str) -> bool:
        """Bring ``filename`` to local disk; False on error."""

    @abstractmethod
    def add_file(self, filename: str) -> bool:
        """Register ``filename``; False on error."""

    @abstractmethod
    def is_existed(self, filename: str) -> bool | None:
        """Whether ``filename`` exists, or None on error."""

    @abstractmethod
    def remove_file(self, filename: str) -> bool:
        """Forget ``filename``; False on error."""


class LocalFileManager(FileManager):
    """Tracks file names in memory without touching the disk. Not thread-safe."""

    def __init__(self) -> None:
        self._files: set[str] = set()
        self._loaded: set[str] = set()

    def load_file(self, filename: str) -> bool:
        """The file is already local; remember that it was asked for."""
        self._loaded.add(filename)
        return True

    def add_file(self, filename: str) -> bool:
        self._files.add(filename)
        return True

    def is_existed(self, filename: str) -> bool:
        return filename in self._files

    def remove_file(self, filename: str) -> bool:
        self._files.discard(filename)
        return True


class Pack:
    """Carries a file manager to index constructors."""

    def __init__(self, package: FileManager | None = None) -> None:
        if package is not None and not isinstance(package, FileManager):
            raise TypeError("Pack only holds a FileManager")
        self._package = package

    def get_pack(self) -> FileManager | None:
        return self._package