"""Rewriting of registryDependencies identifiers into absolute URLs.

shadcn/ui items (button, input, ...) stay as bare names and are resolved by
the shadcn CLI itself. Items published by this registry carry the internal
prefix and must point at their published JSON file instead.
"""

from dataclasses import dataclass
from typing import Any

URL_SCHEMES = ("http://", "https://")


def is_url(dep: str) -> bool:
    """Return True if the identifier is already an absolute http(s) URL."""
    return dep.startswith(URL_SCHEMES)


@dataclass(frozen=True)
class DependencyRewriter:
    """Maps internal-prefix identifiers to `<base_url>/<identifier>.json`."""

    base_url: str
    prefix: str

    def resolve(self, dep: Any) -> Any:
        """Rewrite a single identifier; anything that is not an internal name passes through."""
        if not isinstance(dep, str) or is_url(dep):
            return dep
        if dep.startswith(self.prefix):
            return f"{self.base_url.rstrip('/')}/{dep}.json"
        return dep

    def rewrite(self, deps: Any) -> Any:
        """Return a new list with every identifier resolved.

        The input is never mutated. None or a non-list value is returned as is.
        """
        if not isinstance(deps, list | tuple):
            return deps
        return [self.resolve(dep) for dep in deps]
