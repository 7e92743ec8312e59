"""Release manifest model — the record written to manifest.json.

Field declaration order is the JSON key order. Field names are a
stability contract with the image pull tool; changing either requires
bumping ``SCHEMA_VERSION``.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from sbximages.models.artifacts import ArchArtifacts

SCHEMA_VERSION = 1


class FirecrackerInfo(BaseModel):
    """Expected Firecracker release for the published images."""

    model_config = ConfigDict(frozen=True)

    version: str
    source: str


class BuildInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str  # RFC3339, UTC
    commit: str = ""


class Manifest(BaseModel):
    """A released set of kernel and rootfs images, keyed by architecture."""

    model_config = ConfigDict(frozen=True)

    schema_version: Literal[1] = SCHEMA_VERSION
    version: str
    artifacts: dict[str, ArchArtifacts]
    firecracker: FirecrackerInfo
    build: BuildInfo

    @property
    def architectures(self) -> list[str]:
        """Architecture names in manifest order."""
        return list(self.artifacts)
