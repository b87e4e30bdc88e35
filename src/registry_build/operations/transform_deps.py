"""Post-build rewrite of registryDependencies to full URLs.

Run after the builders (or after `shadcn build`) to convert internal-prefix
dependencies in every JSON file of the output tree into absolute URLs that
the shadcn CLI can resolve. Safe to re-run: URLs are left alone, so a second
pass changes nothing.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from registry_build.context import BuildContext
from registry_build.core.filesystem import FileSystem
from registry_build.core.json_io import read_json, write_json
from registry_build.core.records import rewrite_document
from registry_build.core.rewrite import DependencyRewriter
from registry_build.core.user_feedback import SEPARATOR

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransformResult:
    """Files rewritten and files that could not be processed."""

    transformed: list[Path] = field(default_factory=list)
    failed: list[Path] = field(default_factory=list)


def find_json_files(fs: FileSystem, root: Path, skip_dir_name: str) -> list[Path]:
    """Recursively list *.json files under root, depth-first in name order.

    Directories named skip_dir_name are not entered.
    """
    found: list[Path] = []
    for entry in fs.list_dir(root):
        if entry.is_dir:
            if entry.name == skip_dir_name:
                logger.debug("Skipping source directory: %s", entry.path)
                continue
            found.extend(find_json_files(fs, entry.path, skip_dir_name))
        elif entry.name.endswith(".json"):
            found.append(entry.path)
    return found


def process_file(fs: FileSystem, path: Path, rewriter: DependencyRewriter) -> bool:
    """Rewrite one JSON file in place.

    Returns:
        True if the file was modified and written back

    Raises:
        OSError: If the file cannot be read or written
        ValueError: If the file is not valid JSON
    """
    data = read_json(fs, path)
    if not isinstance(data, dict):
        return False

    rewritten, changed = rewrite_document(data, rewriter)
    if changed:
        write_json(fs, path, rewritten)
    return changed


def transform_output_tree(ctx: BuildContext) -> TransformResult:
    """Rewrite registryDependencies in every JSON file under the output directory.

    A failure on one file is reported and that file is skipped.

    Raises:
        FileNotFoundError: If the output directory does not exist
    """
    feedback = ctx.feedback
    output_root = ctx.config.output_path
    rewriter = ctx.rewriter

    feedback.info("🔗 Transforming registryDependencies to full URLs...\n")
    if not ctx.fs.is_dir(output_root):
        raise FileNotFoundError(f"Output directory not found: {output_root}")

    transformed: list[Path] = []
    failed: list[Path] = []
    for path in find_json_files(ctx.fs, output_root, ctx.config.source_dir_name):
        try:
            modified = process_file(ctx.fs, path, rewriter)
        except (OSError, ValueError) as e:
            feedback.error(f"Error processing {path}: {e}")
            failed.append(path)
            continue

        if modified:
            feedback.success(f"✅ {path.relative_to(output_root)}")
            transformed.append(path)

    feedback.info("")
    feedback.info(SEPARATOR)
    feedback.info(f"✨ Transformed {len(transformed)} files")
    feedback.info(SEPARATOR)
    return TransformResult(transformed=transformed, failed=failed)
