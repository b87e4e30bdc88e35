"""Backend bundle models."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BundleMeta(BaseModel):
    """Provenance metadata published with a bundle."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    source: str
    license: str
    backend: str  # Human-readable backend label, e.g. "PostgreSQL"


class BundleItem(BaseModel):
    """A registry item that installs the complete integration for one backend.

    Field order matches the order keys are published in.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    name: str
    type: str
    title: str
    author: str
    description: str
    dependencies: tuple[str, ...] = ()
    dev_dependencies: tuple[str, ...] | None = Field(default=None, alias="devDependencies")
    registry_dependencies: tuple[str, ...] = Field(default=(), alias="registryDependencies")
    env_vars: dict[str, str] = Field(default_factory=dict, alias="envVars")
    meta: BundleMeta
    docs: str | None = None
    categories: tuple[str, ...] = ()

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Bundle names become file names."""
        if not v or "/" in v:
            msg = f"Invalid bundle name: {v!r}"
            raise ValueError(msg)
        return v

    @field_validator("type")
    @classmethod
    def validate_type(cls, v: str) -> str:
        if not v.startswith("registry:"):
            msg = f"Invalid registry item type: {v}"
            raise ValueError(msg)
        return v

    def to_item(self) -> dict[str, Any]:
        """Registry item dict with camelCase keys, omitting unset optionals."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


@dataclass(frozen=True)
class BundleTable:
    """Immutable, ordered mapping of backend key to bundle item."""

    bundles: Mapping[str, BundleItem] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "bundles", MappingProxyType(dict(self.bundles)))

    def backends(self) -> list[str]:
        return list(self.bundles)

    def items(self) -> Iterator[tuple[str, BundleItem]]:
        return iter(self.bundles.items())

    def __len__(self) -> int:
        return len(self.bundles)
