"""sbximages data models — all Pydantic v2, all frozen (immutable)."""

from sbximages.models.artifacts import (
    ArchArtifacts,
    ArtifactRef,
    KernelArtifact,
    LocatedArtifacts,
    RootfsArtifact,
)
from sbximages.models.config import (
    BuildConfig,
    FirecrackerConfig,
    KernelConfig,
    RootfsConfig,
)
from sbximages.models.manifest import (
    SCHEMA_VERSION,
    BuildInfo,
    FirecrackerInfo,
    Manifest,
)

__all__ = [
    # config
    "BuildConfig",
    "KernelConfig",
    "FirecrackerConfig",
    "RootfsConfig",
    # artifacts
    "ArtifactRef",
    "LocatedArtifacts",
    "KernelArtifact",
    "RootfsArtifact",
    "ArchArtifacts",
    # manifest
    "SCHEMA_VERSION",
    "FirecrackerInfo",
    "BuildInfo",
    "Manifest",
]
