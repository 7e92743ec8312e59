"""Manifest generation pipeline: load config, build manifest, write it.

The manifest is written only after it has been fully built, so a failed
run never leaves a new or truncated manifest.json behind.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from sbximages.core.config_loader import load_config
from sbximages.core.manifest_builder import build_manifest
from sbximages.core.manifest_writer import default_output_path, write_manifest
from sbximages.models.config import BuildConfig
from sbximages.models.manifest import Manifest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    config: BuildConfig
    manifest: Manifest
    output_path: Path


def generate_manifest(
    version: str,
    *,
    config_path: str | Path = "config.yaml",
    build_dir: str | Path = "build",
    commit: str = "",
    output_path: str | Path | None = None,
    strict: bool = False,
    now: datetime | None = None,
) -> GenerationResult:
    """Run the full pipeline and return what was written where.

    ``ConfigError``, ``BuildError`` and ``WriteError`` propagate unchanged.
    """
    target = Path(output_path) if output_path is not None else default_output_path(build_dir)
    logger.info("Generating manifest %s from %s and %s", version, config_path, build_dir)

    config = load_config(config_path, strict=strict)
    manifest = build_manifest(config, version, build_dir, commit, now=now)
    written = write_manifest(manifest, target)
    return GenerationResult(config=config, manifest=manifest, output_path=written)
