"""Manifest builder — assembles a release ``Manifest`` from config and artifacts.

All-or-nothing: every configured architecture is located before the
manifest is assembled, and the first missing artifact aborts the build.
The build date is captured once per call, so every entry of a manifest
shares it.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

from sbximages.core.artifact_locator import LocateError, locate
from sbximages.models.artifacts import ArchArtifacts, KernelArtifact, RootfsArtifact
from sbximages.models.config import BuildConfig
from sbximages.models.manifest import (
    SCHEMA_VERSION,
    BuildInfo,
    FirecrackerInfo,
    Manifest,
)

logger = logging.getLogger(__name__)

KERNEL_SOURCE_PREFIX = "firecracker-ci"
FIRECRACKER_SOURCE = "github.com/firecracker-microvm/firecracker"


class BuildError(RuntimeError):
    """Raised when a manifest cannot be assembled; wraps the ``LocateError``."""

    def __init__(self, message: str, cause: LocateError) -> None:
        super().__init__(message)
        self.cause = cause

    @property
    def architecture(self) -> str:
        return self.cause.architecture


def format_build_date(moment: datetime) -> str:
    """RFC3339 UTC timestamp with second precision, e.g. ``2026-01-02T03:04:05Z``.

    Naive datetimes are taken to already be UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def kernel_source(ci_version: str) -> str:
    return f"{KERNEL_SOURCE_PREFIX}/{ci_version}"


def build_manifest(
    config: BuildConfig,
    version: str,
    build_dir: str | Path,
    commit: str = "",
    *,
    now: datetime | None = None,
) -> Manifest:
    """Locate every configured architecture's artifacts and build the manifest.

    Parameters
    ----------
    config:
        A validated build config (see ``load_config``).
    version:
        Release tag, e.g. ``"v0.1.0"``.
    build_dir:
        Directory holding ``vmlinux-<arch>`` and ``rootfs-<arch>.ext4``.
    commit:
        Source commit identifier; recorded as given.
    now:
        Build instant. Defaults to the current time.

    Raises
    ------
    BuildError
        Any expected artifact is missing or cannot be stat-ed.
    """
    build_date = format_build_date(now or datetime.now(timezone.utc))
    source = kernel_source(config.kernel.ci_version)

    artifacts: dict[str, ArchArtifacts] = {}
    for arch in config.architectures:
        try:
            located = locate(build_dir, arch)
        except LocateError as exc:
            raise BuildError(f"{exc.artifact} artifact for {arch}: {exc}", exc) from exc

        artifacts[arch] = ArchArtifacts(
            kernel=KernelArtifact(
                file=located.kernel.path.name,
                version=config.kernel.version,
                source=source,
                size_bytes=located.kernel.size_bytes,
            ),
            rootfs=RootfsArtifact(
                file=located.rootfs.path.name,
                distro=config.rootfs.distro,
                distro_version=config.rootfs.distro_version,
                profile=config.rootfs.profile,
                size_bytes=located.rootfs.size_bytes,
            ),
        )

    manifest = Manifest(
        schema_version=SCHEMA_VERSION,
        version=version,
        artifacts=artifacts,
        firecracker=FirecrackerInfo(
            version=config.firecracker.version,
            source=FIRECRACKER_SOURCE,
        ),
        build=BuildInfo(date=build_date, commit=commit),
    )
    logger.info(
        "Built manifest %s for %d architecture(s): %s",
        version,
        len(artifacts),
        ", ".join(artifacts),
    )
    return manifest
