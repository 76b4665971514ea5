"""Helpers for decoding images into Qt and Pillow primitives."""

from __future__ import annotations

from dataclasses import dataclass
from io import BytesIO
from typing import Optional
import logging

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError
from PIL.ImageQt import ImageQt
from PySide6.QtCore import Qt
from PySide6.QtGui import QImage

from ..config import RESOURCE_PACKAGE
from ..domain.models.geometry import Size
from ..errors import ImageDecodeError, InvalidArgumentError
from ..resources import load_resource_bytes

_LOGGER = logging.getLogger(__name__)

# Module level alias so tests can simulate a broken ImageQt bridge.
_ImageQt = ImageQt

# Formats tried explicitly when Qt cannot sniff the data on its own.  ``CUR``
# and ``ICO`` are handled by Qt's ico plugin.
_QT_FALLBACK_FORMATS: tuple[str, ...] = ("PNG", "JPEG", "BMP", "CUR", "ICO")


@dataclass(frozen=True)
class DecodedImage:
    """Backend neutral view of a decoded image."""

    width: int
    height: int
    mode: str
    pixels: bytes

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)


def decode_image(data: bytes) -> DecodedImage:
    """Decode *data* with Pillow and return its dimensions and raw pixels.

    EXIF orientation is applied so the reported size matches what is shown on
    screen.
    """

    try:
        with Image.open(BytesIO(data)) as img:
            img = ImageOps.exif_transpose(img)
            if img.mode not in ("RGB", "RGBA", "L"):
                img = img.convert("RGBA")
            pixels = img.tobytes()
            return DecodedImage(img.width, img.height, img.mode, pixels)
    except (UnidentifiedImageError, OSError, ValueError) as exc:
        raise ImageDecodeError(f"unable to decode image data: {exc}") from exc


def qimage_from_pil(image: Image.Image) -> Optional[QImage]:
    """Return a :class:`QImage` copy of the Pillow *image*."""

    if _ImageQt is None:
        return None
    try:
        qt_image = _ImageQt(image.convert("RGBA"))
    except Exception:
        _LOGGER.exception("Failed to convert Pillow image to QImage")
        return None
    # ``ImageQt`` keeps a reference to the Pillow buffer; copying detaches it.
    return QImage(qt_image).copy()


def qimage_from_bytes(data: bytes) -> Optional[QImage]:
    """Return a :class:`QImage` decoded from *data*.

    Qt's own decoders are tried first; Pillow covers formats for which no Qt
    image plugin is installed.
    """

    image = QImage()
    if image.loadFromData(data):
        return image
    for fmt in _QT_FALLBACK_FORMATS:
        if image.loadFromData(data, fmt):
            return image
    try:
        with Image.open(BytesIO(data)) as img:
            img = ImageOps.exif_transpose(img)
            return qimage_from_pil(img)
    except Exception:
        _LOGGER.exception("Pillow failed to decode image bytes in qimage_from_bytes")
        return None


def load_image_resource(name: str, package: str = RESOURCE_PACKAGE) -> QImage:
    """Return the embedded bitmap *name* as a :class:`QImage`."""

    image = qimage_from_bytes(load_resource_bytes(name, package))
    if image is None or image.isNull():
        raise ImageDecodeError(f"resource {name!r} is not a decodable image")
    return image


def thumbnail_size(source: Size, height: int) -> Size:
    """Return the size of a *height* pixel tall thumbnail of *source*.

    The width follows the source aspect ratio, computed in single precision,
    and is truncated, not rounded.
    """

    if height <= 0:
        raise InvalidArgumentError(f"thumbnail height must be positive, got {height}")
    if source.is_empty():
        raise InvalidArgumentError(
            f"cannot create a thumbnail of an empty {source.width}x{source.height} image"
        )
    ratio = np.float32(source.width) / np.float32(source.height)
    return Size(int(np.float32(height) * ratio), height)


def create_thumbnail(image: QImage, height: int) -> QImage:
    """Return a thumbnail of *image* that is *height* pixels tall."""

    if image.isNull():
        raise InvalidArgumentError("cannot create a thumbnail of a null image")
    size = thumbnail_size(Size(image.width(), image.height()), height)
    if size.width <= 0:
        raise InvalidArgumentError(
            f"a {height}px tall thumbnail of {image.width()}x{image.height()} would be empty"
        )
    return image.scaled(
        size.width,
        size.height,
        Qt.AspectRatioMode.IgnoreAspectRatio,
        Qt.TransformationMode.SmoothTransformation,
    )


__all__ = [
    "DecodedImage",
    "create_thumbnail",
    "decode_image",
    "load_image_resource",
    "qimage_from_bytes",
    "qimage_from_pil",
    "thumbnail_size",
]
