"""Flat registry compatible with the shadcn registry index.

Generates one registry item file per item WITHOUT the `content` property of
its files, and copies the source files so they are served at their paths.
See https://ui.shadcn.com/docs/registry/registry-index
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from registry_build.context import BuildContext
from registry_build.core.json_io import write_json
from registry_build.core.records import flatten_item, with_rewritten_dependencies
from registry_build.core.user_feedback import SEPARATOR
from registry_build.io.descriptor import load_registry_descriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ItemStat:
    name: str
    type: str
    files_copied: int


@dataclass(frozen=True)
class FlatBuildResult:
    """Outcome of a flat registry build."""

    items: list[ItemStat] = field(default_factory=list)
    skipped_items: int = 0
    missing_files: list[str] = field(default_factory=list)

    @property
    def files_copied(self) -> int:
        return sum(stat.files_copied for stat in self.items)

    def counts_by_type(self) -> dict[str, int]:
        """Number of written items per item type, in first-seen order."""
        return dict(Counter(stat.type for stat in self.items))


def _served_path(rel_path: str) -> Path:
    """Location of a source file under the output tree.

    Absolute paths are mirrored below the output root instead of replacing it.
    """
    path = Path(rel_path)
    if path.is_absolute():
        return path.relative_to(path.anchor)
    return path


def copy_source_files(ctx: BuildContext, item: dict[str, Any]) -> tuple[int, list[str]]:
    """Copy every file of an item from the project root into the output tree.

    Returns:
        Tuple of (number of files copied, paths that were not found)
    """
    files = item.get("files")
    if not isinstance(files, list):
        return 0, []

    copied = 0
    missing: list[str] = []
    for file in files:
        if not isinstance(file, dict) or not file.get("path"):
            continue
        rel_path = file["path"]
        source = ctx.config.project_root / rel_path
        dest = ctx.config.output_path / _served_path(rel_path)

        if ctx.fs.is_file(source):
            ctx.fs.copy_file(source, dest)
            copied += 1
        else:
            ctx.feedback.warning(f"⚠️  Warning: Source file not found: {rel_path}")
            missing.append(rel_path)

    return copied, missing


def build_flat_registry(ctx: BuildContext) -> FlatBuildResult:
    """Build per-item descriptors, copy sources and write the consolidated registry.json.

    Raises:
        RegistryDescriptorError: If registry.json is unreadable or has no items
    """
    config = ctx.config
    feedback = ctx.feedback
    rewriter = ctx.rewriter

    feedback.info("🚀 Building flat registry (registry index compatible)...\n")
    registry = load_registry_descriptor(ctx.fs, config.registry_path)
    items = registry["items"]

    ctx.fs.make_dirs(config.output_path)
    feedback.info(f"📦 Processing {len(items)} registry items...\n")

    stats: list[ItemStat] = []
    missing_files: list[str] = []
    skipped = 0

    for item in items:
        if not isinstance(item, dict) or not item.get("name"):
            feedback.warning("⚠️  Warning: Item missing name, skipping")
            skipped += 1
            continue

        name = item["name"]
        item_path = config.output_path / f"{name}.json"
        logger.debug("Writing item descriptor: %s", item_path)
        write_json(ctx.fs, item_path, flatten_item(item, rewriter, config.item_schema))

        copied, missing = copy_source_files(ctx, item)
        missing_files.extend(missing)
        item_type = str(item.get("type", "unknown"))
        stats.append(ItemStat(name=name, type=item_type, files_copied=copied))

        feedback.success(f"✅ {name}")
        feedback.info(f"   Type: {item_type}")
        if copied:
            feedback.info(f"   Files: {copied} copied")
        feedback.info("")

    # Source-of-truth index: dependencies rewritten, file content kept.
    consolidated = {
        **registry,
        "items": [
            with_rewritten_dependencies(item, rewriter) if isinstance(item, dict) else item
            for item in items
        ],
    }
    write_json(ctx.fs, config.output_path / "registry.json", consolidated)

    result = FlatBuildResult(items=stats, skipped_items=skipped, missing_files=missing_files)
    _report_summary(ctx, result)
    return result


def _report_summary(ctx: BuildContext, result: FlatBuildResult) -> None:
    feedback = ctx.feedback

    feedback.info(SEPARATOR)
    feedback.info("✨ Build Summary")
    feedback.info(SEPARATOR)
    feedback.info(f"📋 Registry items: {len(result.items)}")
    feedback.info(f"📄 Source files copied: {result.files_copied}")
    feedback.info(f"📁 Output directory: {ctx.config.output_dir}")
    feedback.info("")
    feedback.info("📊 Items by Type:")
    for item_type, count in result.counts_by_type().items():
        feedback.info(f"   {item_type}: {count}")
    feedback.info("")
    feedback.success("✅ Flat registry built successfully!")
    feedback.info("")
    feedback.info("🎯 Registry Index Compatible:")
    feedback.info("   ✓ No content property in files")
    feedback.info("   ✓ Source files served at paths")
    feedback.info("   ✓ Flat structure maintained")
    feedback.info("")
    first = result.items[0].name if result.items else "<item>"
    feedback.info("📦 Test installation:")
    feedback.info(f"   npx shadcn@latest add http://localhost:3001/r/{first}.json")
    feedback.info("")
