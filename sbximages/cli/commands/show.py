"""``sbximages show`` — render an existing manifest.json."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.panel import Panel
from rich.table import Table

from sbximages.cli.output import console, fail
from sbximages.config import settings
from sbximages.core.manifest_writer import (
    ManifestReadError,
    default_output_path,
    load_manifest,
)
from sbximages.models.manifest import Manifest


def format_size(size_bytes: int) -> str:
    """Human-readable binary size, e.g. ``64.0 MiB``."""
    size = float(size_bytes)
    for unit in ("B", "KiB", "MiB"):
        if size < 1024:
            return f"{size:.0f} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} GiB"


def render_manifest_table(manifest: Manifest) -> Table:
    table = Table(title=f"Release {manifest.version}")
    table.add_column("Arch", style="cyan")
    table.add_column("Kernel")
    table.add_column("Kernel Size", justify="right")
    table.add_column("Rootfs")
    table.add_column("Rootfs Size", justify="right")

    for arch, entry in manifest.artifacts.items():
        table.add_row(
            arch,
            f"{entry.kernel.file} ({entry.kernel.version})",
            format_size(entry.kernel.size_bytes),
            f"{entry.rootfs.file} ({entry.rootfs.distro} {entry.rootfs.distro_version}, "
            f"{entry.rootfs.profile})",
            format_size(entry.rootfs.size_bytes),
        )
    return table


def show_cmd(
    path: Optional[Path] = typer.Argument(
        None,
        help="Path to manifest.json (default: <build-dir>/manifest.json).",
    ),
) -> None:
    """Show the artifacts recorded in a manifest.json."""
    manifest_path = path if path is not None else default_output_path(settings.build_dir)
    try:
        manifest = load_manifest(manifest_path)
    except ManifestReadError as exc:
        fail(exc)

    console.print(render_manifest_table(manifest))
    console.print(
        Panel(
            "\n".join([
                f"[bold]Schema:[/bold]      {manifest.schema_version}",
                f"[bold]Firecracker:[/bold] {manifest.firecracker.version} "
                f"({manifest.firecracker.source})",
                f"[bold]Built:[/bold]       {manifest.build.date}",
                f"[bold]Commit:[/bold]      {manifest.build.commit or 'unknown'}",
            ]),
            title="[bold]Build[/bold]",
            border_style="green",
        )
    )
