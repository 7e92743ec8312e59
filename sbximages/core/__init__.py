"""Core manifest pipeline: config loading, artifact location, build, write."""

from sbximages.core.artifact_locator import (
    LocateError,
    kernel_file_name,
    locate,
    rootfs_file_name,
)
from sbximages.core.config_loader import ConfigError, load_config
from sbximages.core.manifest_builder import BuildError, build_manifest
from sbximages.core.manifest_writer import (
    ManifestReadError,
    WriteError,
    default_output_path,
    load_manifest,
    render_manifest,
    write_manifest,
)
from sbximages.core.pipeline import GenerationResult, generate_manifest

__all__ = [
    "ConfigError",
    "load_config",
    "LocateError",
    "locate",
    "kernel_file_name",
    "rootfs_file_name",
    "BuildError",
    "build_manifest",
    "WriteError",
    "ManifestReadError",
    "default_output_path",
    "render_manifest",
    "write_manifest",
    "load_manifest",
    "GenerationResult",
    "generate_manifest",
]
