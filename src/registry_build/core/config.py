"""Build configuration data structures and loading.

Provides immutable build config, optionally overridden from a
registry-build.toml file in the project root. Loaded once at the CLI entry
point and stored in BuildContext.
"""

import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path

CONFIG_FILE_NAME = "registry-build.toml"

DEFAULT_BASE_URL = (
    "https://raw.githubusercontent.com/RMNCLDYO/coderabbit-shadcn-registry/main/public/r"
)
DEFAULT_INTERNAL_PREFIX = "coderabbit-"
ITEM_SCHEMA_URL = "https://ui.shadcn.com/schema/registry-item.json"
REGISTRY_SCHEMA_URL = "https://ui.shadcn.com/schema/registry.json"


@dataclass(frozen=True)
class BuildConfig:
    """Immutable build configuration.

    Paths other than project_root are relative to project_root.
    All fields are read-only after construction.
    """

    project_root: Path
    registry_file: str = "registry.json"
    output_dir: str = "public/r"
    source_dir: str = "registry"
    base_url: str = DEFAULT_BASE_URL
    internal_prefix: str = DEFAULT_INTERNAL_PREFIX
    registry_name: str = "coderabbit"
    homepage: str = "https://github.com/RMNCLDYO/coderabbit-shadcn-registry"
    item_schema: str = ITEM_SCHEMA_URL
    registry_schema: str = REGISTRY_SCHEMA_URL

    @property
    def registry_path(self) -> Path:
        return self.project_root / self.registry_file

    @property
    def output_path(self) -> Path:
        return self.project_root / self.output_dir

    @property
    def source_dir_name(self) -> str:
        """Directory name skipped when scanning output for JSON files."""
        return Path(self.source_dir).name


def _overridable_keys() -> set[str]:
    return {f.name for f in fields(BuildConfig) if f.name != "project_root"}


def load_build_config(project_root: Path) -> BuildConfig:
    """Load build config for a project root.

    Returns defaults when registry-build.toml does not exist.

    Raises:
        ValueError: If the config file has unknown keys or non-string values
    """
    config = BuildConfig(project_root=project_root)
    config_path = project_root / CONFIG_FILE_NAME
    if not config_path.exists():
        return config

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

    unknown = sorted(set(data) - _overridable_keys())
    if unknown:
        raise ValueError(f"Unknown keys in {config_path}: {', '.join(unknown)}")

    for key, value in data.items():
        if not isinstance(value, str) or not value:
            raise ValueError(f"'{key}' in {config_path} must be a non-empty string")

    return replace(config, **data)
