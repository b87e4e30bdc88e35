from registry_build.core.filesystem.abc import DirEntry, FileSystem
from registry_build.core.filesystem.real import RealFileSystem

__all__ = [
    "DirEntry",
    "FileSystem",
    "RealFileSystem",
]
