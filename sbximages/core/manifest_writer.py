"""Manifest serialization — renders, writes and reads manifest.json.

Output is indented JSON (two spaces) in model field order, followed by a
newline. Writes go straight to the target path: the file is created or
truncated in place and missing parent directories are an error.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from sbximages.models.manifest import SCHEMA_VERSION, Manifest

logger = logging.getLogger(__name__)

MANIFEST_FILE_NAME = "manifest.json"


class WriteError(RuntimeError):
    """Raised when a manifest cannot be serialized or written."""


class ManifestReadError(RuntimeError):
    """Raised when a manifest file cannot be read back."""


def default_output_path(build_dir: str | Path) -> Path:
    """``<build_dir>/manifest.json``."""
    return Path(build_dir) / MANIFEST_FILE_NAME


def render_manifest(manifest: Manifest) -> str:
    """Serialize *manifest* to the manifest.json text."""
    try:
        payload = manifest.model_dump(mode="json")
        return json.dumps(payload, indent=2) + "\n"
    except (TypeError, ValueError) as exc:
        raise WriteError(f"marshaling manifest: {exc}") from exc


def write_manifest(manifest: Manifest, output_path: str | Path) -> Path:
    """Write *manifest* to *output_path*, creating or truncating it."""
    output_path = Path(output_path)
    text = render_manifest(manifest)
    try:
        with output_path.open("w", encoding="utf-8") as fh:
            fh.write(text)
    except OSError as exc:
        raise WriteError(f"writing {output_path}: {exc.strerror or exc}") from exc

    logger.info("Wrote %d bytes to %s", len(text.encode("utf-8")), output_path)
    return output_path


def parse_manifest(text: str, *, source: str = "<string>") -> Manifest:
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestReadError(f"parsing {source}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ManifestReadError(f"parsing {source}: manifest must be a JSON object")

    schema = raw.get("schema_version")
    if schema != SCHEMA_VERSION:
        raise ManifestReadError(
            f"{source}: unsupported schema_version {schema!r} "
            f"(expected {SCHEMA_VERSION})"
        )

    try:
        return Manifest.model_validate(raw)
    except ValidationError as exc:
        raise ManifestReadError(f"parsing {source}: {exc}") from exc


def load_manifest(path: str | Path) -> Manifest:
    """Read a manifest.json back into a ``Manifest``."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestReadError(f"reading {path}: {exc}") from exc
    return parse_manifest(text, source=str(path))
