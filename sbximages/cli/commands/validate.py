"""``sbximages validate`` — strict check of config.yaml.

Unlike manifest generation, validation requires every field: the kernel
CI channel and all rootfs settings must be present as well.
"""

from __future__ import annotations

from pathlib import Path

import typer

from sbximages.cli.output import console, fail
from sbximages.config import settings
from sbximages.core.config_loader import ConfigError, load_config


def validate_cmd(
    config_path: Path = typer.Option(
        settings.config_path,
        "--config",
        "-c",
        help="Path to config.yaml.",
    ),
) -> None:
    """Validate config.yaml, requiring every build field."""
    try:
        cfg = load_config(config_path, strict=True)
    except ConfigError as exc:
        fail(exc)

    console.print(
        f"Config OK: kernel={cfg.kernel.version} ci={cfg.kernel.ci_version} "
        f"fc={cfg.firecracker.version} profile={cfg.rootfs.profile} "
        f"arch={' '.join(cfg.architectures)}",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )
