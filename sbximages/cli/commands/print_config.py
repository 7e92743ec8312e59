"""``sbximages print-config`` — print config values as KEY=VALUE lines.

Meant for shell and Makefile consumption, e.g.::

    eval "$(sbximages print-config)"
    for arch in ${ARCHITECTURES}; do ./scripts/download-kernel.sh --arch "${arch}" ...; done
"""

from __future__ import annotations

import shlex
from pathlib import Path

import typer

from sbximages.cli.output import fail
from sbximages.config import settings
from sbximages.core.config_loader import ConfigError, load_config
from sbximages.models.config import BuildConfig


def config_variables(cfg: BuildConfig) -> dict[str, str]:
    """Flatten *cfg* into the shell variable names the build scripts use."""
    return {
        "KERNEL_VERSION": cfg.kernel.version,
        "CI_VERSION": cfg.kernel.ci_version,
        "FC_VERSION": cfg.firecracker.version,
        "DISTRO": cfg.rootfs.distro,
        "DISTRO_VERSION": cfg.rootfs.distro_version,
        "PROFILE": cfg.rootfs.profile,
        "ARCHITECTURES": " ".join(cfg.architectures),
    }


def print_config_cmd(
    config_path: Path = typer.Option(
        settings.config_path,
        "--config",
        "-c",
        help="Path to config.yaml.",
    ),
    quote: bool = typer.Option(
        False,
        "--quote",
        help="Shell-quote values so the output is safe to eval.",
    ),
) -> None:
    """Print the extracted configuration values."""
    try:
        cfg = load_config(config_path)
    except ConfigError as exc:
        fail(exc)

    for key, value in config_variables(cfg).items():
        typer.echo(f"{key}={shlex.quote(value) if quote else value}")
