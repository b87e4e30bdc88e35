"""Tests for the post-build URL transformer."""

import json
from pathlib import Path

import pytest

from registry_build.context import BuildContext
from registry_build.core.config import DEFAULT_BASE_URL, BuildConfig
from registry_build.core.filesystem.fake import FakeFileSystem
from registry_build.core.user_feedback import FakeFeedback
from registry_build.operations.transform_deps import find_json_files, transform_output_tree

ROOT = Path("/fake/project")
OUTPUT = ROOT / "public" / "r"


def _context(files: dict[Path, str], unreadable: set[Path] | None = None):
    fs = FakeFileSystem(files=files, unreadable=unreadable)
    feedback = FakeFeedback()
    ctx = BuildContext.for_test(fs=fs, feedback=feedback, config=BuildConfig(project_root=ROOT))
    return ctx, fs, feedback


def test_find_json_files_recurses_and_skips_source_directory() -> None:
    """Test enumeration: nested JSON found, registry/ subtree skipped."""
    fs = FakeFileSystem(
        files={
            OUTPUT / "a.json": "{}",
            OUTPUT / "notes.txt": "",
            OUTPUT / "convex" / "coderabbit.json": "{}",
            OUTPUT / "registry" / "source.json": "{}",
            OUTPUT / "registry.json": "{}",
        }
    )

    found = find_json_files(fs, OUTPUT, "registry")

    assert found == [
        OUTPUT / "a.json",
        OUTPUT / "convex" / "coderabbit.json",
        OUTPUT / "registry.json",
    ]


def test_rewrites_root_and_items_dependencies() -> None:
    """Test both document shapes: item file and registry index."""
    item_path = OUTPUT / "coderabbit-form.json"
    index_path = OUTPUT / "registry.json"
    ctx, fs, feedback = _context(
        {
            item_path: json.dumps(
                {"name": "coderabbit-form", "registryDependencies": ["coderabbit-types"]}
            ),
            index_path: json.dumps(
                {"items": [{"name": "x", "title": "X", "registryDependencies": ["coderabbit-a"]}]}
            ),
        }
    )

    result = transform_output_tree(ctx)

    assert result.transformed == [item_path, index_path]
    item = json.loads(fs.files[item_path])
    assert item["registryDependencies"] == [f"{DEFAULT_BASE_URL}/coderabbit-types.json"]
    index = json.loads(fs.files[index_path])
    assert index["items"][0] == {
        "name": "x",
        "title": "X",
        "registryDependencies": [f"{DEFAULT_BASE_URL}/coderabbit-a.json"],
    }
    assert "✅ coderabbit-form.json" in feedback.text
    assert "✨ Transformed 2 files" in feedback.text


def test_second_pass_modifies_zero_files() -> None:
    """Test idempotence across runs."""
    ctx, fs, _ = _context(
        {OUTPUT / "a.json": json.dumps({"registryDependencies": ["button", "coderabbit-b"]})}
    )

    first = transform_output_tree(ctx)
    writes_after_first = list(fs.write_calls)
    second = transform_output_tree(ctx)

    assert len(first.transformed) == 1
    assert second.transformed == []
    assert fs.write_calls == writes_after_first


def test_unchanged_files_are_not_rewritten() -> None:
    """Test that files without internal dependencies keep their exact bytes."""
    original = '{"registryDependencies": ["button"], "x": 1}'
    ctx, fs, _ = _context({OUTPUT / "a.json": original})

    result = transform_output_tree(ctx)

    assert result.transformed == []
    assert fs.files[OUTPUT / "a.json"] == original
    assert fs.write_calls == []


def test_bad_file_is_reported_and_skipped() -> None:
    """Test that a parse or read failure does not stop the scan."""
    broken = OUTPUT / "broken.json"
    locked = OUTPUT / "locked.json"
    good = OUTPUT / "good.json"
    ctx, fs, feedback = _context(
        {
            broken: "{oops",
            locked: "{}",
            good: json.dumps({"registryDependencies": ["coderabbit-x"]}),
        },
        unreadable={locked},
    )

    result = transform_output_tree(ctx)

    assert result.failed == [broken, locked]
    assert result.transformed == [good]
    errors = [message for level, message in feedback.messages if level == "error"]
    assert len(errors) == 2
    assert str(broken) in errors[0]


def test_non_object_json_is_left_alone() -> None:
    """Test that top-level arrays are neither errors nor modified."""
    ctx, _, _ = _context({OUTPUT / "list.json": '["coderabbit-a"]'})

    result = transform_output_tree(ctx)

    assert result.transformed == []
    assert result.failed == []


def test_missing_output_directory_raises() -> None:
    """Test that running before any build is reported as missing output."""
    ctx, _, _ = _context({})

    with pytest.raises(FileNotFoundError, match="Output directory not found"):
        transform_output_tree(ctx)
