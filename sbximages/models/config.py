"""Build configuration models — the shape of ``config.yaml``."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

def _null_to_empty(value: Any, empty: Any) -> Any:
    return empty if value is None else value


class _Section(BaseModel):
    """Base for config sections: missing or null scalars read as ``""``."""

    model_config = ConfigDict(frozen=True)

    @field_validator("*", mode="before")
    @classmethod
    def _null_scalars(cls, value: Any) -> Any:
        return _null_to_empty(value, "")


class KernelConfig(_Section):
    """Kernel binary pin: version plus the Firecracker CI channel it comes from."""

    version: str = ""
    ci_version: str = ""


class FirecrackerConfig(_Section):
    """Firecracker release the images are built for (metadata only)."""

    version: str = ""


class RootfsConfig(_Section):
    distro: str = ""
    distro_version: str = ""
    profile: str = ""


class BuildConfig(BaseModel):
    """Project-level build configuration, loaded from config.yaml.

    Every section is optional at the model level; which empty values are
    fatal is decided by ``sbximages.core.config_loader.load_config``.
    """

    model_config = ConfigDict(frozen=True)

    kernel: KernelConfig = KernelConfig()
    firecracker: FirecrackerConfig = FirecrackerConfig()
    rootfs: RootfsConfig = RootfsConfig()
    architectures: list[str] = Field(default_factory=list)

    @field_validator("kernel", "firecracker", "rootfs", mode="before")
    @classmethod
    def _null_sections(cls, value: Any) -> Any:
        return _null_to_empty(value, {})

    @field_validator("architectures", mode="before")
    @classmethod
    def _null_architectures(cls, value: Any) -> Any:
        return _null_to_empty(value, [])
