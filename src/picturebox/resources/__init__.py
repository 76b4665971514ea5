"""Embedded binary resources bundled with picturebox.

Resources are addressed by a path relative to a resource package, for example
``cursors/crosshair.cur``.  Manifest style names where folders are separated by
dots (``cursors.crosshair.cur``) are accepted as well; every dot except the one
introducing the file extension is treated as a folder separator.
"""

from __future__ import annotations

import logging
from importlib import resources
from importlib.resources.abc import Traversable

from ..config import RESOURCE_PACKAGE
from ..errors import ResourceNotFoundError

_LOGGER = logging.getLogger(__name__)


def _resource_parts(name: str) -> list[str]:
    cleaned = name.strip().replace("\\", "/").strip("/")
    if not cleaned:
        raise ResourceNotFoundError("empty resource name")
    if "/" in cleaned:
        parts = [part for part in cleaned.split("/") if part]
    else:
        stem, dot, suffix = cleaned.rpartition(".")
        if not dot or not stem:
            parts = [cleaned]
        else:
            parts = stem.split(".")
            parts[-1] = f"{parts[-1]}.{suffix}"
    if any(part in {".", ".."} for part in parts):
        raise ResourceNotFoundError(f"invalid resource name: {name!r}")
    return parts


def _locate(name: str, package: str) -> Traversable:
    try:
        node = resources.files(package)
    except ModuleNotFoundError as exc:
        raise ResourceNotFoundError(f"resource package {package!r} not found") from exc
    for part in _resource_parts(name):
        node = node.joinpath(part)
    if not node.is_file():
        raise ResourceNotFoundError(f"resource {name!r} not found in {package}")
    return node


def load_resource_bytes(name: str, package: str = RESOURCE_PACKAGE) -> bytes:
    """Return the raw bytes of the embedded resource *name*."""

    node = _locate(name, package)
    data = node.read_bytes()
    _LOGGER.debug("Loaded resource %s (%d bytes) from %s", name, len(data), package)
    return data


def resource_exists(name: str, package: str = RESOURCE_PACKAGE) -> bool:
    """Return ``True`` when *name* resolves to a file inside *package*."""

    try:
        _locate(name, package)
    except ResourceNotFoundError:
        return False
    return True


__all__ = ["load_resource_bytes", "resource_exists"]
