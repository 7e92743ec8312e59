"""Build config loading — reads config.yaml into a ``BuildConfig``.

Scalars are read as raw YAML text (``yaml.BaseLoader``) so that values such
as ``distro_version: 3.20`` keep their exact spelling instead of being
coerced to floats. Plain `~`, `null` or empty values still read as null;
quoted spellings such as `"null"` are kept as text.

Only the architecture list, ``kernel.version`` and ``firecracker.version``
are required by default. ``strict=True`` additionally requires the CI
channel and every rootfs field; ``sbximages validate`` loads strictly.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from sbximages.models.config import BuildConfig

logger = logging.getLogger(__name__)

# Checked only when loading with strict=True, in report order.
STRICT_FIELDS: tuple[tuple[str, str], ...] = (
    ("kernel", "ci_version"),
    ("rootfs", "distro"),
    ("rootfs", "distro_version"),
    ("rootfs", "profile"),
)


class ConfigError(ValueError):
    """Raised when the build config is unreadable, malformed, or incomplete."""


class _ConfigLoader(yaml.BaseLoader):
    """``BaseLoader`` that still resolves plain null scalars to ``None``.

    Quoted scalars are never resolved, so ``profile: "null"`` stays text.
    """


_ConfigLoader.add_implicit_resolver(
    "tag:yaml.org,2002:null",
    re.compile(r"^(?:~|null|Null|NULL|)$"),
    ["~", "n", "N", ""],
)
_ConfigLoader.add_constructor("tag:yaml.org,2002:null", lambda loader, node: None)


def _describe_yaml_error(exc: yaml.YAMLError) -> str:
    """One-line summary of a YAML error: problem plus 1-based position."""
    if isinstance(exc, yaml.MarkedYAMLError) and exc.problem:
        mark = exc.problem_mark
        if mark is not None:
            return f"{exc.problem} (line {mark.line + 1}, column {mark.column + 1})"
        return exc.problem
    return " ".join(str(exc).split())


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error["loc"]) or "<root>"
        parts.append(f"{loc}: {error['msg']}")
    return "; ".join(parts)


def parse_config(text: str, *, source: str = "<string>") -> BuildConfig:
    """Parse config.yaml content without checking required fields."""
    try:
        raw = yaml.load(text, Loader=_ConfigLoader)
    except yaml.YAMLError as exc:
        raise ConfigError(f"parsing {source}: {_describe_yaml_error(exc)}") from exc

    if raw is None or raw == "":
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(
            f"parsing {source}: top-level document must be a mapping, "
            f"got {type(raw).__name__}"
        )

    try:
        return BuildConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"parsing {source}: {_describe_validation_error(exc)}") from exc


def check_config(
    config: BuildConfig, *, source: str = "<string>", strict: bool = False
) -> BuildConfig:
    """Enforce required fields; returns *config* unchanged when valid."""
    if not config.architectures:
        raise ConfigError(f"no architectures defined in {source}")

    seen: set[str] = set()
    for arch in config.architectures:
        if not arch.strip():
            raise ConfigError(f"blank architecture name in {source}")
        if "/" in arch or "\\" in arch or arch in (".", ".."):
            raise ConfigError(f"invalid architecture name {arch!r} in {source}")
        if arch in seen:
            raise ConfigError(f"duplicate architecture {arch!r} in {source}")
        seen.add(arch)

    if not config.kernel.version:
        raise ConfigError(f"kernel.version is required in {source}")
    if not config.firecracker.version:
        raise ConfigError(f"firecracker.version is required in {source}")

    if strict:
        missing = [
            f"{section}.{name}"
            for section, name in STRICT_FIELDS
            if not getattr(getattr(config, section), name)
        ]
        if missing:
            raise ConfigError(f"{', '.join(missing)} required in {source}")

    return config


def load_config(path: str | Path, *, strict: bool = False) -> BuildConfig:
    """Read, parse and validate the build config at *path*.

    Raises
    ------
    ConfigError
        The file cannot be read or parsed, or a required field is empty.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"reading {path}: {exc}") from exc

    source = str(path)
    config = check_config(parse_config(text, source=source), source=source, strict=strict)
    logger.debug(
        "Loaded %s: kernel=%s ci=%s fc=%s arch=%s",
        path,
        config.kernel.version,
        config.kernel.ci_version,
        config.firecracker.version,
        ",".join(config.architectures),
    )
    return config
