from __future__ import annotations

import os
from importlib import metadata
from pathlib import Path

DISTRIBUTION_NAME = "catalog-admin"

_DEFAULT_APP_VERSION = "0.1.0"
# optional build stamp shipped next to this module
_VERSION_FILE = Path(__file__).with_name("app_version.txt")


def _version_from_file(path: Path) -> str | None:
    try:
        stamp = path.read_text(encoding="utf-8").strip()
    except OSError:
        return None
    return stamp or None


def _version_from_metadata() -> str | None:
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return None


def get_app_version() -> str:
    """Env override, then build stamp, then installed metadata, then the default."""
    override = (os.getenv("CATALOG_APP_VERSION") or "").strip()
    if override:
        return override
    return _version_from_file(_VERSION_FILE) or _version_from_metadata() or _DEFAULT_APP_VERSION


__all__ = ["DISTRIBUTION_NAME", "get_app_version"]
