"""Top-level registry descriptor I/O."""

import json
import logging
from pathlib import Path
from typing import Any

from registry_build.core.filesystem import FileSystem
from registry_build.core.json_io import read_json
from registry_build.errors import RegistryDescriptorError

logger = logging.getLogger(__name__)


def load_registry_descriptor(fs: FileSystem, path: Path) -> dict[str, Any]:
    """Read registry.json and check it has an items list.

    Raises:
        RegistryDescriptorError: If the file is unreadable, is not a JSON
            object, or lacks an `items` list
    """
    logger.debug("Reading registry descriptor: %s", path)
    try:
        data = read_json(fs, path)
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise RegistryDescriptorError(path.name, str(e)) from e

    if not isinstance(data, dict):
        raise RegistryDescriptorError(path.name, "expected a JSON object at the top level")
    if not isinstance(data.get("items"), list):
        raise RegistryDescriptorError(path.name, "no items found")

    logger.debug("Descriptor has %d items", len(data["items"]))
    return data
