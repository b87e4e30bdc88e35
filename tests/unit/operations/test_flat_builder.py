"""Tests for the flat registry builder."""

import json
from pathlib import Path

import pytest

from registry_build.context import BuildContext
from registry_build.core.config import DEFAULT_BASE_URL, ITEM_SCHEMA_URL, BuildConfig
from registry_build.core.filesystem.fake import FakeFileSystem
from registry_build.core.user_feedback import FakeFeedback
from registry_build.errors import RegistryDescriptorError
from registry_build.operations.flat import build_flat_registry

ROOT = Path("/fake/project")
OUTPUT = ROOT / "public" / "r"


def _context(registry: object, extra_files: dict[Path, str] | None = None):
    files = {ROOT / "registry.json": json.dumps(registry)}
    files.update(extra_files or {})
    fs = FakeFileSystem(files=files)
    feedback = FakeFeedback()
    ctx = BuildContext.for_test(fs=fs, feedback=feedback, config=BuildConfig(project_root=ROOT))
    return ctx, fs, feedback


def test_item_descriptor_rewritten_and_tagged() -> None:
    """Test the coderabbit-form example descriptor."""
    ctx, fs, _ = _context(
        {
            "name": "coderabbit",
            "items": [
                {
                    "name": "coderabbit-form",
                    "type": "registry:block",
                    "registryDependencies": ["button", "coderabbit-types"],
                }
            ],
        }
    )

    build_flat_registry(ctx)

    item = json.loads(fs.files[OUTPUT / "coderabbit-form.json"])
    assert item["$schema"] == ITEM_SCHEMA_URL
    assert item["registryDependencies"] == [
        "button",
        f"{DEFAULT_BASE_URL}/coderabbit-types.json",
    ]


def test_file_content_stripped_and_source_copied() -> None:
    """Test the lib/foo.ts example: content dropped, file served at its path."""
    ctx, fs, _ = _context(
        {
            "items": [
                {
                    "name": "coderabbit-foo",
                    "type": "registry:lib",
                    "files": [
                        {
                            "path": "lib/foo.ts",
                            "content": "export const x=1",
                            "type": "registry:lib",
                        }
                    ],
                }
            ]
        },
        {ROOT / "lib" / "foo.ts": "export const x=1"},
    )

    result = build_flat_registry(ctx)

    item = json.loads(fs.files[OUTPUT / "coderabbit-foo.json"])
    assert item["files"] == [{"path": "lib/foo.ts", "type": "registry:lib"}]
    assert fs.files[OUTPUT / "lib" / "foo.ts"] == "export const x=1"
    assert result.files_copied == 1


def test_absolute_source_path_mirrored_under_output() -> None:
    ctx, fs, _ = _context(
        {"items": [{"name": "a", "files": [{"path": "/elsewhere/abs.ts"}]}]},
        {Path("/elsewhere/abs.ts"): "export const abs = 1"},
    )

    result = build_flat_registry(ctx)

    assert fs.files[OUTPUT / "elsewhere" / "abs.ts"] == "export const abs = 1"
    assert fs.files[Path("/elsewhere/abs.ts")] == "export const abs = 1"
    assert result.files_copied == 1


def test_no_descriptor_has_content_even_without_source_files() -> None:
    """Test that content is stripped whether or not the source exists."""
    ctx, fs, _ = _context(
        {
            "items": [
                {"name": "a", "files": [{"path": "a.ts", "content": "a"}, {"path": "b.ts"}]},
                {"name": "b", "files": [{"path": "c.ts", "content": "c", "target": "x/c.ts"}]},
            ]
        }
    )

    build_flat_registry(ctx)

    for name in ("a", "b"):
        item = json.loads(fs.files[OUTPUT / f"{name}.json"])
        assert all("content" not in entry for entry in item["files"])
    b = json.loads(fs.files[OUTPUT / "b.json"])
    assert b["files"] == [{"path": "c.ts", "target": "x/c.ts"}]


def test_missing_source_file_warns_and_continues() -> None:
    """Test that a missing source file is non-fatal."""
    ctx, fs, feedback = _context(
        {
            "items": [
                {"name": "a", "files": [{"path": "lib/missing.ts"}, {"path": "lib/ok.ts"}]},
            ]
        },
        {ROOT / "lib" / "ok.ts": "ok"},
    )

    result = build_flat_registry(ctx)

    assert feedback.warnings == ["⚠️  Warning: Source file not found: lib/missing.ts"]
    assert result.missing_files == ["lib/missing.ts"]
    assert result.files_copied == 1
    assert OUTPUT / "lib" / "missing.ts" not in fs.files


def test_item_without_name_skipped_with_warning() -> None:
    """Test that nameless items produce no descriptor but the build completes."""
    ctx, fs, feedback = _context(
        {"items": [{"type": "registry:ui"}, {"name": "kept", "type": "registry:ui"}]}
    )

    result = build_flat_registry(ctx)

    assert feedback.warnings == ["⚠️  Warning: Item missing name, skipping"]
    assert result.skipped_items == 1
    assert [stat.name for stat in result.items] == ["kept"]
    descriptors = {p.name for p in fs.files if p.parent == OUTPUT}
    assert descriptors == {"kept.json", "registry.json"}


def test_consolidated_registry_keeps_content_and_rewrites() -> None:
    """Test that the output registry.json is the source-of-truth index."""
    registry = {
        "$schema": "https://ui.shadcn.com/schema/registry.json",
        "name": "coderabbit",
        "homepage": "https://example.com",
        "items": [
            {
                "name": "a",
                "registryDependencies": ["coderabbit-types"],
                "files": [{"path": "a.ts", "content": "inline"}],
            },
            {"type": "registry:ui"},
        ],
    }
    ctx, fs, _ = _context(registry)

    build_flat_registry(ctx)

    consolidated = json.loads(fs.files[OUTPUT / "registry.json"])
    assert consolidated["name"] == "coderabbit"
    assert consolidated["homepage"] == "https://example.com"
    assert consolidated["items"][0]["files"][0]["content"] == "inline"
    assert consolidated["items"][0]["registryDependencies"] == [
        f"{DEFAULT_BASE_URL}/coderabbit-types.json"
    ]
    assert consolidated["items"][1] == {"type": "registry:ui"}


def test_summary_groups_items_by_type() -> None:
    """Test counts by type in the build summary."""
    ctx, _, feedback = _context(
        {
            "items": [
                {"name": "a", "type": "registry:lib"},
                {"name": "b", "type": "registry:block"},
                {"name": "c", "type": "registry:lib"},
                {"name": "d"},
            ]
        }
    )

    result = build_flat_registry(ctx)

    assert result.counts_by_type() == {"registry:lib": 2, "registry:block": 1, "unknown": 1}
    assert "📋 Registry items: 4" in feedback.text
    assert "   registry:lib: 2" in feedback.text


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        json.dumps({"name": "no items"}),
        json.dumps({"items": "nope"}),
        json.dumps(["a", "list"]),
    ],
)
def test_malformed_descriptor_is_fatal(content: str) -> None:
    """Test that bad descriptors raise before anything is written."""
    fs = FakeFileSystem(files={ROOT / "registry.json": content})
    ctx = BuildContext.for_test(fs=fs, config=BuildConfig(project_root=ROOT))

    with pytest.raises(RegistryDescriptorError):
        build_flat_registry(ctx)

    assert fs.write_calls == []


def test_missing_descriptor_is_fatal() -> None:
    """Test that an absent registry.json raises RegistryDescriptorError."""
    ctx = BuildContext.for_test(config=BuildConfig(project_root=ROOT))

    with pytest.raises(RegistryDescriptorError, match="registry.json"):
        build_flat_registry(ctx)
