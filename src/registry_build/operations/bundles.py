"""Backend bundle registries.

Generates one complete bundle item per backend (localstorage, convex, ...).
Bundles pull in every required component through registryDependencies
without embedding content, so they stay registry-index compatible.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from registry_build.context import BuildContext
from registry_build.core.config import BuildConfig
from registry_build.core.json_io import write_json
from registry_build.core.records import with_rewritten_dependencies
from registry_build.core.rewrite import DependencyRewriter
from registry_build.core.user_feedback import SEPARATOR
from registry_build.models.bundle import BundleItem, BundleTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BundleOutput:
    """Files written for one backend."""

    backend: str
    item_path: Path
    registry_path: Path


def generate_bundle_item(
    bundle: BundleItem, rewriter: DependencyRewriter, schema: str
) -> dict[str, Any]:
    """Bundle item descriptor: schema tag, bundle fields, rewritten dependencies."""
    return with_rewritten_dependencies({"$schema": schema, **bundle.to_item()}, rewriter)


def create_bundle_registry(
    items: list[dict[str, Any]], rewriter: DependencyRewriter, config: BuildConfig
) -> dict[str, Any]:
    """Registry index wrapping the given items, with dependencies rewritten."""
    return {
        "$schema": config.registry_schema,
        "name": config.registry_name,
        "homepage": config.homepage,
        "items": [with_rewritten_dependencies(item, rewriter) for item in items],
    }


def build_bundles(ctx: BuildContext, table: BundleTable) -> list[BundleOutput]:
    """Write `<backend>/<name>.json` and `<backend>/registry.json` for every bundle.

    Filesystem errors propagate to the caller.
    """
    feedback = ctx.feedback
    config = ctx.config
    rewriter = ctx.rewriter

    feedback.info("📦 Building backend bundle registries...\n")
    feedback.info(f"Processing {len(table)} backend bundles...\n")

    outputs: list[BundleOutput] = []
    for backend, bundle in table.items():
        bundle_dir = config.output_path / backend
        logger.debug("Bundle %s -> %s", backend, bundle_dir)
        ctx.fs.make_dirs(bundle_dir)

        item_path = bundle_dir / f"{bundle.name}.json"
        write_json(ctx.fs, item_path, generate_bundle_item(bundle, rewriter, config.item_schema))

        registry_path = bundle_dir / "registry.json"
        write_json(
            ctx.fs, registry_path, create_bundle_registry([bundle.to_item()], rewriter, config)
        )

        outputs.append(
            BundleOutput(backend=backend, item_path=item_path, registry_path=registry_path)
        )

        feedback.success(f"✅ {backend}")
        feedback.info(f"   {bundle.title}")
        feedback.info(f"   Backend: {bundle.meta.backend}")
        feedback.info(f"   Dependencies: {len(bundle.registry_dependencies)} registry items")
        feedback.info("")

    _report_summary(ctx, table)
    return outputs


def _report_summary(ctx: BuildContext, table: BundleTable) -> None:
    feedback = ctx.feedback
    base_url = ctx.config.base_url.rstrip("/")

    feedback.info(SEPARATOR)
    feedback.info("✨ Bundle Summary")
    feedback.info(SEPARATOR)
    feedback.info(f"📦 Bundles created: {len(table)}")
    feedback.info(f"📁 Output: {ctx.config.output_dir}/<backend>/<bundle>.json")
    feedback.info("")
    feedback.success("✅ Backend bundles built successfully!")
    feedback.info("")
    feedback.info("📦 Installation URLs:")
    for backend, bundle in table.items():
        feedback.info(f"   {backend}: {base_url}/{backend}/{bundle.name}.json")
    feedback.info("")
