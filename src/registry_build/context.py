"""Application context with dependency injection.

The BuildContext dataclass holds all dependencies (filesystem, feedback,
config, bundle table) and is created once at the CLI entry point, then
threaded through the operations.
"""

from dataclasses import dataclass
from pathlib import Path

from registry_build.core.config import BuildConfig, load_build_config
from registry_build.core.filesystem import FileSystem, RealFileSystem
from registry_build.core.rewrite import DependencyRewriter
from registry_build.core.user_feedback import (
    InteractiveFeedback,
    SuppressedFeedback,
    UserFeedback,
)
from registry_build.io.bundles import load_bundle_table
from registry_build.models.bundle import BundleTable


@dataclass(frozen=True)
class BuildContext:
    """Immutable context holding all dependencies for build operations.

    Attributes:
        fs: Filesystem operations
        feedback: User-facing progress output
        config: Paths, URLs and schema tags for this build
        bundles: Backend bundle table used by the bundles builder
        debug: Debug flag for error handling (full stack traces)
    """

    fs: FileSystem
    feedback: UserFeedback
    config: BuildConfig
    bundles: BundleTable
    debug: bool

    @property
    def rewriter(self) -> DependencyRewriter:
        return DependencyRewriter(
            base_url=self.config.base_url, prefix=self.config.internal_prefix
        )

    @staticmethod
    def for_test(
        fs: FileSystem | None = None,
        feedback: UserFeedback | None = None,
        config: BuildConfig | None = None,
        bundles: BundleTable | None = None,
        debug: bool = False,
    ) -> "BuildContext":
        """Create test context with optional pre-configured implementations.

        Uses in-memory fakes by default so no real filesystem is touched.

        Args:
            fs: Optional FileSystem. If None, creates an empty FakeFileSystem.
            feedback: Optional UserFeedback. If None, creates FakeFeedback.
            config: Build config (defaults to BuildConfig(project_root=Path("/fake/project")))
            bundles: Bundle table (defaults to an empty table)
            debug: Whether to enable debug mode (default False).

        Example:
            >>> from registry_build.core.filesystem.fake import FakeFileSystem
            >>> fs = FakeFileSystem(files={Path("/fake/project/registry.json"): "{}"})
            >>> ctx = BuildContext.for_test(fs=fs)
        """
        from registry_build.core.filesystem.fake import FakeFileSystem
        from registry_build.core.user_feedback import FakeFeedback

        return BuildContext(
            fs=fs if fs is not None else FakeFileSystem(),
            feedback=feedback if feedback is not None else FakeFeedback(),
            config=(
                config if config is not None else BuildConfig(project_root=Path("/fake/project"))
            ),
            bundles=bundles if bundles is not None else BundleTable(),
            debug=debug,
        )


def create_context(project_root: Path, *, quiet: bool, debug: bool) -> BuildContext:
    """Create production context with real implementations.

    Raises:
        ValueError: If registry-build.toml or the bundle table is invalid
    """
    return BuildContext(
        fs=RealFileSystem(),
        feedback=SuppressedFeedback() if quiet else InteractiveFeedback(),
        config=load_build_config(project_root),
        bundles=load_bundle_table(),
        debug=debug,
    )
