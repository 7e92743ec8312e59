"""Shared test fixtures for sbximages."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

import pytest

from sbximages.core.artifact_locator import kernel_file_name, rootfs_file_name

EXAMPLE_CONFIG = """\
kernel:
  version: "6.1.155"
  ci_version: "v1.15"
firecracker:
  version: "1.7.0"
rootfs:
  distro: alpine
  distro_version: "3.23"
  profile: balanced
architectures:
  - x86_64
  - aarch64
"""

# arch -> (kernel bytes, rootfs bytes)
EXAMPLE_SIZES: dict[str, tuple[int, int]] = {
    "x86_64": (10_485_760, 67_108_864),
    "aarch64": (9_000_000, 70_000_000),
}


@pytest.fixture
def tmp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for test artifacts."""
    return tmp_path


@pytest.fixture
def fixed_now() -> datetime:
    """A deterministic build instant."""
    return datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


@pytest.fixture
def write_config(tmp_dir: Path) -> Callable[..., Path]:
    """Factory fixture: write config.yaml text and return its path."""

    def _factory(text: str = EXAMPLE_CONFIG, name: str = "config.yaml") -> Path:
        path = tmp_dir / name
        path.write_text(text, encoding="utf-8")
        return path

    return _factory


def _sparse_file(path: Path, size: int) -> None:
    with path.open("wb") as fh:
        fh.truncate(size)


@pytest.fixture
def make_build_dir(tmp_dir: Path) -> Callable[..., Path]:
    """Factory fixture: create a build dir with sparse artifacts of given sizes.

    ``skip`` names files (e.g. ``"rootfs-aarch64.ext4"``) to leave out.
    """

    def _factory(
        sizes: dict[str, tuple[int, int]] | None = None,
        *,
        name: str = "build",
        skip: tuple[str, ...] = (),
    ) -> Path:
        build_dir = tmp_dir / name
        build_dir.mkdir(parents=True, exist_ok=True)
        for arch, (kernel_size, rootfs_size) in (sizes or EXAMPLE_SIZES).items():
            for file_name, size in (
                (kernel_file_name(arch), kernel_size),
                (rootfs_file_name(arch), rootfs_size),
            ):
                if file_name not in skip:
                    _sparse_file(build_dir / file_name, size)
        return build_dir

    return _factory


@pytest.fixture
def config_path(write_config: Callable[..., Path]) -> Path:
    """The example config.yaml (x86_64 + aarch64)."""
    return write_config()


@pytest.fixture
def build_dir(make_build_dir: Callable[..., Path]) -> Path:
    """A build dir holding every artifact the example config expects."""
    return make_build_dir()
