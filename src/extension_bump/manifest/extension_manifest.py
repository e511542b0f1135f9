# src/extension_bump/manifest/extension_manifest.py

"""
vss-extension.json handling.

The manifest carries the extension version as a plain "X.Y.Z" string and is the
source of truth for the current version.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.json_files import load_json, write_json
from ..core.version import InvalidVersionError, ManifestError, Version, parse_version

logger = logging.getLogger(__name__)


def _load_manifest(path: Path) -> dict:
    if not path.is_file():
        raise ManifestError(f"Extension manifest not found: {path}")
    try:
        return load_json(path)
    except ValueError as e:
        raise ManifestError(f"Extension manifest is not a JSON object: {path} ({e})") from e


def read_manifest_version(path: str | Path) -> Version:
    path = Path(path)
    data = _load_manifest(path)

    raw = data.get("version")
    if not isinstance(raw, str):
        raise ManifestError(f"{path}: top-level 'version' must be a string, got {raw!r}")
    try:
        return parse_version(raw)
    except InvalidVersionError as e:
        raise ManifestError(f"{path}: {e}") from e


def update_extension_version(
    path: str | Path,
    requested: Version,
    *,
    indent: int = 4,
    dry_run: bool = False,
) -> None:
    """Set the manifest's top-level "version" to the full requested version."""
    path = Path(path)
    data = _load_manifest(path)

    logger.info("Updating version of %s to %s", path.name, requested)
    data["version"] = str(requested)

    if dry_run:
        return
    write_json(path, data, indent=indent)
