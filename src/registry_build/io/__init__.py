"""I/O operations for registry-build."""

from registry_build.io.bundles import load_bundle_table
from registry_build.io.descriptor import load_registry_descriptor

__all__ = [
    "load_bundle_table",
    "load_registry_descriptor",
]
