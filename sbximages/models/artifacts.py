"""Artifact models — located build outputs and their manifest records."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class ArtifactRef(BaseModel):
    """A build output found on disk.

    Transient: built per architecture while assembling a manifest and
    never persisted on its own.
    """

    model_config = ConfigDict(frozen=True)

    path: Path
    size_bytes: int = Field(ge=0)


class LocatedArtifacts(BaseModel):
    """The kernel/rootfs pair located for one architecture."""

    model_config = ConfigDict(frozen=True)

    kernel: ArtifactRef
    rootfs: ArtifactRef


class KernelArtifact(BaseModel):
    model_config = ConfigDict(frozen=True)

    file: str
    version: str
    source: str  # "firecracker-ci/<ci_version>"
    size_bytes: int = Field(ge=0)


class RootfsArtifact(BaseModel):
    model_config = ConfigDict(frozen=True)

    file: str
    distro: str
    distro_version: str
    profile: str
    size_bytes: int = Field(ge=0)


class ArchArtifacts(BaseModel):
    """Per-architecture entry of ``Manifest.artifacts``."""

    model_config = ConfigDict(frozen=True)

    kernel: KernelArtifact
    rootfs: RootfsArtifact
