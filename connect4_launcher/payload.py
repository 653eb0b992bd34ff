"""Bundled payload handling: asset table lookup, extraction and temp file cleanup.

The asset table is the ``connect4_launcher.assets`` package. Anything placed
there at build time (see ``scripts/bundle_payload.py``) ships as package data
and is addressed by its file name.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
import uuid
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Optional, Union

from connect4_launcher.models import LaunchError

logger = logging.getLogger(__name__)

ASSETS_PACKAGE = "connect4_launcher.assets"

# Package machinery that lives beside the assets but is not one
_NON_ASSETS = {"__init__.py", "__pycache__"}

AssetRoot = Union[Traversable, Path]


def _assets_root(assets: Optional[AssetRoot] = None) -> AssetRoot:
    if assets is not None:
        return assets
    return resources.files(ASSETS_PACKAGE)


def list_payloads(assets: Optional[AssetRoot] = None) -> list[str]:
    """Return the names of every bundled asset, sorted. Empty if none."""
    root = _assets_root(assets)
    if not root.is_dir():
        return []
    return sorted(
        entry.name
        for entry in root.iterdir()
        if entry.name not in _NON_ASSETS and entry.is_file()
    )


def find_payload(name: str, assets: Optional[AssetRoot] = None) -> Optional[Traversable]:
    """Look up a bundled asset by logical name.

    Returns:
        The asset as a traversable resource, or None when it is not bundled.
    """
    if not name or name in _NON_ASSETS:
        return None
    root = _assets_root(assets)
    if not root.is_dir():
        return None
    resource = root.joinpath(name)
    if not resource.is_file():
        logger.debug(f"Asset {name!r} not present in {root}")
        return None
    return resource


def temp_payload_path(
    temp_dir: Optional[Path] = None,
    prefix: str = "Connect-4-",
    suffix: str = ".jar",
) -> Path:
    """Build a fresh, collision-resistant path for the extracted payload.

    A new uuid4 goes into every path, so concurrent launchers never share a file.
    """
    directory = Path(temp_dir) if temp_dir is not None else Path(tempfile.gettempdir())
    return directory / f"{prefix}{uuid.uuid4()}{suffix}"


def extract_payload(resource: AssetRoot, destination: Path) -> int:
    """Stream a bundled asset into destination, creating or overwriting it.

    Returns:
        Number of bytes written.

    Raises:
        LaunchError: If the asset cannot be read or the file cannot be written.
    """
    try:
        with resource.open("rb") as src, open(destination, "wb") as dst:
            shutil.copyfileobj(src, dst)
            written = dst.tell()
    except OSError as e:
        raise LaunchError(str(e)) from e

    logger.debug(f"Extracted {written} bytes to {destination}")
    return written


def remove_quietly(path: Path) -> bool:
    """Delete path if it exists, discarding any error.

    Returns:
        True if no file remains at path afterwards.
    """
    path = Path(path)
    try:
        if path.exists():
            path.unlink()
        return not path.exists()
    except OSError as e:
        logger.debug(f"Could not remove {path}: {e}")
        return False
