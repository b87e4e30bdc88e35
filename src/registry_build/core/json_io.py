"""JSON file I/O on top of the FileSystem abstraction."""

import json
from pathlib import Path
from typing import Any

from registry_build.core.filesystem import FileSystem


def dumps_pretty(data: Any) -> str:
    """Serialize the way registry files are published: 2-space indent, UTF-8 kept."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def read_json(fs: FileSystem, path: Path) -> Any:
    """Read and decode a JSON file.

    Raises:
        FileNotFoundError: If path does not exist
        json.JSONDecodeError: If the file is not valid JSON
    """
    return json.loads(fs.read_text(path))


def write_json(fs: FileSystem, path: Path, data: Any) -> None:
    """Write data as pretty-printed JSON, overwriting path."""
    fs.write_text(path, dumps_pretty(data))
