"""Artifact locator — finds the kernel and rootfs images for an architecture.

File names are a stability contract with the image pull tool:

    vmlinux-<arch>        kernel binary, no extension
    rootfs-<arch>.ext4    ext4 root filesystem image

A missing artifact is a hard failure; there are no fallback locations.
"""

from __future__ import annotations

import logging
import stat
from pathlib import Path

from sbximages.models.artifacts import ArtifactRef, LocatedArtifacts

logger = logging.getLogger(__name__)


class LocateError(RuntimeError):
    """Raised when an expected artifact is absent or cannot be stat-ed."""

    def __init__(self, architecture: str, artifact: str, path: Path, detail: str) -> None:
        super().__init__(detail)
        self.architecture = architecture
        self.artifact = artifact  # "kernel" or "rootfs"
        self.path = path
        self.detail = detail


def kernel_file_name(architecture: str) -> str:
    return f"vmlinux-{architecture}"


def rootfs_file_name(architecture: str) -> str:
    return f"rootfs-{architecture}.ext4"


def _stat_artifact(path: Path, architecture: str, artifact: str) -> ArtifactRef:
    try:
        info = path.stat()
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise LocateError(
            architecture, artifact, path, f"stat {path}: {reason}"
        ) from exc
    if not stat.S_ISREG(info.st_mode):
        raise LocateError(
            architecture, artifact, path, f"stat {path}: not a regular file"
        )
    return ArtifactRef(path=path, size_bytes=info.st_size)


def locate(build_dir: str | Path, architecture: str) -> LocatedArtifacts:
    """Resolve and stat both artifacts for *architecture* under *build_dir*."""
    build_dir = Path(build_dir)
    kernel = _stat_artifact(build_dir / kernel_file_name(architecture), architecture, "kernel")
    rootfs = _stat_artifact(build_dir / rootfs_file_name(architecture), architecture, "rootfs")
    logger.debug(
        "Located %s: %s (%d bytes), %s (%d bytes)",
        architecture,
        kernel.path,
        kernel.size_bytes,
        rootfs.path,
        rootfs.size_bytes,
    )
    return LocatedArtifacts(kernel=kernel, rootfs=rootfs)
