"""sbximages: release tooling for SBX Firecracker VM images.

Builds the release manifest that describes the published kernel binaries
and Alpine ext4 root filesystems, one pair per architecture:

  - config.yaml loading and validation
  - artifact location (``vmlinux-<arch>``, ``rootfs-<arch>.ext4``)
  - manifest assembly and manifest.json serialization (schema version 1)
"""

__version__ = "0.1.0"

from sbximages.core.pipeline import generate_manifest
from sbximages.models.manifest import SCHEMA_VERSION, Manifest

__all__ = ["generate_manifest", "Manifest", "SCHEMA_VERSION", "__version__"]
