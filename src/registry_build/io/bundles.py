"""Bundle table I/O."""

from pathlib import Path

import yaml

from registry_build.models.bundle import BundleItem, BundleTable

DEFAULT_BUNDLES_PATH = Path(__file__).parent.parent / "data" / "bundles.yaml"


def load_bundle_table(path: Path = DEFAULT_BUNDLES_PATH) -> BundleTable:
    """Load and validate the backend bundle table.

    Defaults to the table shipped as package data.

    Raises:
        ValueError: If the file has no bundles or a bundle fails validation
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not data or not data.get("bundles"):
        raise ValueError(f"No bundles defined in {path}")

    return BundleTable(
        {
            backend: BundleItem.model_validate(config)
            for backend, config in data["bundles"].items()
        }
    )
