"""End-to-end tests of the manifest pipeline: config -> locate -> build -> write."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

import pytest

from sbximages.core.config_loader import ConfigError
from sbximages.core.manifest_builder import BuildError
from sbximages.core.manifest_writer import load_manifest
from sbximages.core.pipeline import generate_manifest

pytestmark = pytest.mark.integration


def test_example_release(config_path: Path, build_dir: Path, fixed_now: datetime) -> None:
    result = generate_manifest(
        "v0.1.0",
        config_path=config_path,
        build_dir=build_dir,
        commit="abc123",
        now=fixed_now,
    )

    assert result.output_path == build_dir / "manifest.json"
    data = json.loads(result.output_path.read_text(encoding="utf-8"))
    assert data == {
        "schema_version": 1,
        "version": "v0.1.0",
        "artifacts": {
            "x86_64": {
                "kernel": {
                    "file": "vmlinux-x86_64",
                    "version": "6.1.155",
                    "source": "firecracker-ci/v1.15",
                    "size_bytes": 10485760,
                },
                "rootfs": {
                    "file": "rootfs-x86_64.ext4",
                    "distro": "alpine",
                    "distro_version": "3.23",
                    "profile": "balanced",
                    "size_bytes": 67108864,
                },
            },
            "aarch64": {
                "kernel": {
                    "file": "vmlinux-aarch64",
                    "version": "6.1.155",
                    "source": "firecracker-ci/v1.15",
                    "size_bytes": 9000000,
                },
                "rootfs": {
                    "file": "rootfs-aarch64.ext4",
                    "distro": "alpine",
                    "distro_version": "3.23",
                    "profile": "balanced",
                    "size_bytes": 70000000,
                },
            },
        },
        "firecracker": {
            "version": "1.7.0",
            "source": "github.com/firecracker-microvm/firecracker",
        },
        "build": {"date": "2026-01-02T03:04:05Z", "commit": "abc123"},
    }


def test_round_trip(config_path: Path, build_dir: Path) -> None:
    result = generate_manifest("v0.1.0", config_path=config_path, build_dir=build_dir)
    assert load_manifest(result.output_path) == result.manifest


def test_rerun_differs_only_in_build_date(config_path: Path, build_dir: Path) -> None:
    first = generate_manifest(
        "v0.1.0",
        config_path=config_path,
        build_dir=build_dir,
        commit="abc123",
        now=datetime(2026, 1, 1, tzinfo=timezone.utc),
    )
    first_text = first.output_path.read_text(encoding="utf-8")
    second = generate_manifest(
        "v0.1.0",
        config_path=config_path,
        build_dir=build_dir,
        commit="abc123",
        now=datetime(2026, 3, 1, tzinfo=timezone.utc),
    )

    before = json.loads(first_text)
    after = json.loads(second.output_path.read_text(encoding="utf-8"))
    assert before["build"].pop("date") == "2026-01-01T00:00:00Z"
    assert after["build"].pop("date") == "2026-03-01T00:00:00Z"
    assert before == after


@pytest.mark.parametrize(
    "missing",
    ["vmlinux-x86_64", "rootfs-x86_64.ext4", "vmlinux-aarch64", "rootfs-aarch64.ext4"],
)
def test_any_missing_artifact_writes_nothing(config_path: Path, make_build_dir, missing: str) -> None:
    build_dir = make_build_dir(skip=(missing,))
    with pytest.raises(BuildError):
        generate_manifest("v0.1.0", config_path=config_path, build_dir=build_dir)
    assert not (build_dir / "manifest.json").exists()


def test_empty_architectures_fails_before_locating(write_config, tmp_dir: Path) -> None:
    path = write_config(
        "kernel: {version: '6.1.155'}\nfirecracker: {version: '1.7.0'}\narchitectures: []\n"
    )
    missing_build_dir = tmp_dir / "never-created"
    with pytest.raises(ConfigError, match="no architectures defined"):
        generate_manifest("v0.1.0", config_path=path, build_dir=missing_build_dir)
    assert not missing_build_dir.exists()
