"""Filesystem operations abstraction for testing.

This module provides an ABC for the handful of filesystem operations the
builders need, so transformation logic can run against an in-memory fake in
unit tests. Real implementations use pathlib and shutil.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DirEntry:
    """One child of a directory listing."""

    name: str
    path: Path
    is_dir: bool


class FileSystem(ABC):
    """Abstract filesystem operations for dependency injection."""

    @abstractmethod
    def read_text(self, path: Path) -> str:
        """Read a UTF-8 text file.

        Raises:
            FileNotFoundError: If path does not exist
        """
        ...

    @abstractmethod
    def write_text(self, path: Path, content: str) -> None:
        """Write a UTF-8 text file, replacing any existing content.

        The parent directory must already exist.
        """
        ...

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Check if a file or directory exists at path."""
        ...

    @abstractmethod
    def is_file(self, path: Path) -> bool:
        """Check if path is an existing regular file."""
        ...

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        """Check if path is an existing directory."""
        ...

    @abstractmethod
    def list_dir(self, path: Path) -> list[DirEntry]:
        """List direct children of a directory, sorted by name.

        Raises:
            FileNotFoundError: If path does not exist
        """
        ...

    @abstractmethod
    def make_dirs(self, path: Path) -> None:
        """Create a directory and any missing parents. No-op if it exists."""
        ...

    @abstractmethod
    def copy_file(self, src: Path, dest: Path) -> None:
        """Copy a file byte-for-byte, creating dest's parent directories.

        Raises:
            FileNotFoundError: If src does not exist
        """
        ...
