"""Create Qt cursors from embedded ``.cur`` resources.

Qt can only build a colour cursor from a pixmap, so cursor bytes are staged in
a temporary file, decoded through Qt's image plugins and turned into a
:class:`QCursor`.  The hotspot stored in the CUR directory entry is honoured;
other formats fall back to the pixmap centre.
"""

from __future__ import annotations

import logging
import os
import struct
import tempfile
from pathlib import Path
from typing import Optional

from PySide6.QtGui import QCursor, QPixmap

from ...config import CUR_FILE_SUFFIX, RESOURCE_PACKAGE
from ...errors import CursorCreationError
from ...resources import load_resource_bytes
from ...utils.image_loader import qimage_from_bytes

_LOGGER = logging.getLogger(__name__)

_ICONDIR = struct.Struct("<HHH")
_ICONDIRENTRY = struct.Struct("<BBBBHHII")
_CURSOR_RESOURCE_TYPE = 2

# ``QCursor`` interprets negative hotspot coordinates as "use the centre".
_CENTRE_HOTSPOT = (-1, -1)


def parse_cursor_hotspot(data: bytes) -> Optional[tuple[int, int]]:
    """Return the hotspot of the first image in a CUR file, or ``None``."""

    if len(data) < _ICONDIR.size + _ICONDIRENTRY.size:
        return None
    reserved, resource_type, count = _ICONDIR.unpack_from(data, 0)
    if reserved != 0 or resource_type != _CURSOR_RESOURCE_TYPE or count < 1:
        return None
    entry = _ICONDIRENTRY.unpack_from(data, _ICONDIR.size)
    return entry[4], entry[5]


def _load_pixmap(path: Path, data: bytes) -> Optional[QPixmap]:
    pixmap = QPixmap(str(path))
    if not pixmap.isNull():
        return pixmap
    _LOGGER.debug("Qt could not read %s directly, decoding bytes instead", path)
    image = qimage_from_bytes(data)
    if image is None or image.isNull():
        return None
    pixmap = QPixmap.fromImage(image)
    if pixmap.isNull():
        return None
    return pixmap


def _build_cursor(pixmap: Optional[QPixmap], data: bytes, source: str) -> QCursor:
    if pixmap is None:
        raise CursorCreationError(f"unable to decode cursor image from {source}")
    hot_x, hot_y = parse_cursor_hotspot(data) or _CENTRE_HOTSPOT
    _LOGGER.debug(
        "Created %dx%d cursor from %s with hotspot (%d, %d)",
        pixmap.width(),
        pixmap.height(),
        source,
        hot_x,
        hot_y,
    )
    return QCursor(pixmap, hot_x, hot_y)


def load_cursor_from_file(path: Path) -> QCursor:
    """Return a colour cursor loaded from the cursor file at *path*."""

    try:
        data = path.read_bytes()
    except OSError as exc:
        raise CursorCreationError(f"unable to read cursor file {path}: {exc}") from exc
    return _build_cursor(_load_pixmap(path, data), data, str(path))


def create_cursor(data: bytes) -> QCursor:
    """Return a :class:`QCursor` built from raw cursor (or image) bytes.

    Must be called on the GUI thread with a ``QGuiApplication`` running.
    """

    if not data:
        raise CursorCreationError("cursor data is empty")
    fd, tmp_name = tempfile.mkstemp(suffix=CUR_FILE_SUFFIX)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        pixmap = _load_pixmap(tmp_path, data)
    finally:
        tmp_path.unlink(missing_ok=True)
    return _build_cursor(pixmap, data, "cursor data")


def create_cursor_from_resource(name: str, package: str = RESOURCE_PACKAGE) -> QCursor:
    """Return a cursor built from the embedded resource *name*."""

    return create_cursor(load_resource_bytes(name, package))


__all__ = [
    "create_cursor",
    "create_cursor_from_resource",
    "load_cursor_from_file",
    "parse_cursor_hotspot",
]
