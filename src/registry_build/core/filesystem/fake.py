"""Fake FileSystem implementation for testing.

FakeFileSystem is an in-memory implementation that never touches disk,
enabling fast tests of the builders and the post-build transformer.
"""

from pathlib import Path

from registry_build.core.filesystem.abc import DirEntry, FileSystem


class FakeFileSystem(FileSystem):
    """In-memory fake filesystem keyed by absolute Path.

    Constructor Injection:
    - Initial files are provided via constructor parameters
    - Parent directories of every file exist implicitly

    Mutations performed by the code under test are visible through the
    `files` property and the write_calls list.

    Example:
        >>> fs = FakeFileSystem(files={Path("/repo/registry.json"): '{"items": []}'})
        >>> fs.read_text(Path("/repo/registry.json"))
        '{"items": []}'
        >>> fs.is_dir(Path("/repo"))
        True
    """

    def __init__(
        self,
        *,
        files: dict[Path, str] | None = None,
        directories: set[Path] | None = None,
        unreadable: set[Path] | None = None,
    ) -> None:
        """Initialize fake with predetermined contents.

        Args:
            files: Mapping of file path to text content
            directories: Extra (possibly empty) directories that exist
            unreadable: Paths whose read_text() raises PermissionError
        """
        self._files: dict[Path, str] = dict(files or {})
        self._directories: set[Path] = set(directories or set())
        self._unreadable = set(unreadable or set())
        self._write_calls: list[Path] = []
        for path in list(self._files) + list(self._directories):
            self._add_parents(path)

    @property
    def files(self) -> dict[Path, str]:
        """Current file contents. This property is for test assertions only."""
        return self._files

    @property
    def write_calls(self) -> list[Path]:
        """Paths passed to write_text() or used as copy destinations, in order."""
        return self._write_calls

    def _add_parents(self, path: Path) -> None:
        for parent in path.parents:
            self._directories.add(parent)

    def read_text(self, path: Path) -> str:
        if path in self._unreadable:
            raise PermissionError(f"Permission denied: '{path}'")
        if path not in self._files:
            raise FileNotFoundError(f"No such file: '{path}'")
        return self._files[path]

    def write_text(self, path: Path, content: str) -> None:
        if path.parent not in self._directories:
            raise FileNotFoundError(f"No such directory: '{path.parent}'")
        self._files[path] = content
        self._write_calls.append(path)

    def exists(self, path: Path) -> bool:
        return path in self._files or path in self._directories

    def is_file(self, path: Path) -> bool:
        return path in self._files

    def is_dir(self, path: Path) -> bool:
        return path in self._directories

    def list_dir(self, path: Path) -> list[DirEntry]:
        if path not in self._directories:
            raise FileNotFoundError(f"No such directory: '{path}'")
        entries = {
            child: DirEntry(name=child.name, path=child, is_dir=False)
            for child in self._files
            if child.parent == path
        }
        for child in self._directories:
            if child.parent == path and child != path:
                entries[child] = DirEntry(name=child.name, path=child, is_dir=True)
        return sorted(entries.values(), key=lambda entry: entry.name)

    def make_dirs(self, path: Path) -> None:
        self._directories.add(path)
        self._add_parents(path)

    def copy_file(self, src: Path, dest: Path) -> None:
        content = self.read_text(src)
        self.make_dirs(dest.parent)
        self._files[dest] = content
        self._write_calls.append(dest)
