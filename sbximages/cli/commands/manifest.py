"""``sbximages manifest`` — generate manifest.json from config and artifacts.

Reads the build config, stats ``vmlinux-<arch>`` and ``rootfs-<arch>.ext4``
for every configured architecture, and writes the release manifest. Any
failure is fatal and leaves no manifest behind.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from sbximages.cli.output import console, fail
from sbximages.config import settings
from sbximages.core.config_loader import ConfigError
from sbximages.core.manifest_builder import BuildError
from sbximages.core.manifest_writer import WriteError
from sbximages.core.pipeline import generate_manifest


class ArgumentError(ValueError):
    """Raised when a required command-line value is missing or empty."""


def _require(value: str, option: str) -> str:
    if not value.strip():
        raise ArgumentError(f"{option} is required")
    return value


def manifest_cmd(
    version: str = typer.Option(
        ...,
        "--version",
        help="Release version (e.g. v0.1.0).",
    ),
    config_path: Path = typer.Option(
        settings.config_path,
        "--config",
        "-c",
        help="Path to config.yaml.",
    ),
    build_dir: Path = typer.Option(
        settings.build_dir,
        "--build-dir",
        "-b",
        help="Path to the build output directory.",
    ),
    commit: str = typer.Option(
        settings.commit,
        "--commit",
        help="Git commit SHA recorded in the manifest.",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path for manifest.json (default: <build-dir>/manifest.json).",
    ),
    strict: bool = typer.Option(
        False,
        "--strict/--no-strict",
        help="Also require kernel.ci_version and all rootfs fields.",
    ),
) -> None:
    """Generate manifest.json for a release from config.yaml and built artifacts."""
    try:
        _require(version, "--version")
    except ArgumentError as exc:
        fail(exc)

    try:
        result = generate_manifest(
            version,
            config_path=config_path,
            build_dir=build_dir,
            commit=commit,
            output_path=output,
            strict=strict,
        )
    except ConfigError as exc:
        fail(exc, context="loading config")
    except BuildError as exc:
        fail(exc, context="building manifest")
    except WriteError as exc:
        fail(exc, context="writing manifest")

    console.print(
        f"Wrote manifest: {result.output_path}", markup=False, highlight=False, soft_wrap=True
    )
