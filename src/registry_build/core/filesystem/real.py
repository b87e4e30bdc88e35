"""Real filesystem implementation using pathlib and shutil."""

import shutil
from pathlib import Path

from registry_build.core.filesystem.abc import DirEntry, FileSystem


class RealFileSystem(FileSystem):
    """Production implementation backed by the local disk."""

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def write_text(self, path: Path, content: str) -> None:
        path.write_text(content, encoding="utf-8")

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def list_dir(self, path: Path) -> list[DirEntry]:
        return [
            DirEntry(name=child.name, path=child, is_dir=child.is_dir())
            for child in sorted(path.iterdir(), key=lambda p: p.name)
        ]

    def make_dirs(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def copy_file(self, src: Path, dest: Path) -> None:
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(src, dest)
