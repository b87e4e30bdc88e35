"""Pure transforms over JSON records (dicts decoded from registry files).

None of these functions touch the filesystem or mutate their arguments.
"""

from collections.abc import Callable, Mapping
from typing import Any

from registry_build.core.rewrite import DependencyRewriter

REGISTRY_DEPENDENCIES = "registryDependencies"


def strip_key(records: Any, key: str) -> Any:
    """Return a copy of a list of records with `key` removed from each mapping.

    Entries that are not mappings are kept unchanged. A non-list value is
    returned as is.
    """
    if not isinstance(records, list):
        return records
    return [
        {k: v for k, v in record.items() if k != key} if isinstance(record, Mapping) else record
        for record in records
    ]


def replace_field(record: Mapping[str, Any], key: str, fn: Callable[[Any], Any]) -> dict[str, Any]:
    """Return a shallow copy of record with `key` mapped through fn.

    If the key is absent the copy is returned without it being added.
    """
    result = dict(record)
    if key in result:
        result[key] = fn(result[key])
    return result


def with_rewritten_dependencies(
    record: Mapping[str, Any], rewriter: DependencyRewriter
) -> dict[str, Any]:
    """Shallow copy of record with registryDependencies rewritten to URLs."""
    return replace_field(record, REGISTRY_DEPENDENCIES, rewriter.rewrite)


def flatten_item(
    item: Mapping[str, Any], rewriter: DependencyRewriter, schema: str
) -> dict[str, Any]:
    """Build the served descriptor for one registry item.

    The schema tag comes first and may be overridden by the item itself.
    registryDependencies are rewritten and inline file content is dropped so
    consumers fetch file bodies from their served path.
    """
    flattened = {"$schema": schema, **item}
    flattened = with_rewritten_dependencies(flattened, rewriter)
    return replace_field(flattened, "files", lambda files: strip_key(files, "content"))


def rewrite_document(
    document: Mapping[str, Any], rewriter: DependencyRewriter
) -> tuple[dict[str, Any], bool]:
    """Rewrite registryDependencies at the root and inside each of `items`.

    Returns the rewritten document and whether anything changed. Items are only
    replaced (shallow merge) when their dependencies actually change, so an
    already-rewritten document comes back equal to the input.
    """
    result = dict(document)
    changed = False

    if result.get(REGISTRY_DEPENDENCIES):
        rewritten = rewriter.rewrite(result[REGISTRY_DEPENDENCIES])
        if rewritten != result[REGISTRY_DEPENDENCIES]:
            result[REGISTRY_DEPENDENCIES] = rewritten
            changed = True

    items = result.get("items")
    if isinstance(items, list):
        new_items = []
        for item in items:
            if isinstance(item, Mapping) and item.get(REGISTRY_DEPENDENCIES):
                rewritten = rewriter.rewrite(item[REGISTRY_DEPENDENCIES])
                if rewritten != item[REGISTRY_DEPENDENCIES]:
                    changed = True
                    item = {**item, REGISTRY_DEPENDENCIES: rewritten}
            new_items.append(item)
        result["items"] = new_items

    return result, changed
