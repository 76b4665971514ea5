from __future__ import annotations

import io
from unittest.mock import MagicMock

import pytest
from PIL import Image
from PySide6.QtGui import QColor, QImage

from picturebox.domain.models.geometry import Size
from picturebox.errors import ImageDecodeError, InvalidArgumentError, ResourceNotFoundError
from picturebox.resources import load_resource_bytes
from picturebox.utils import image_loader


def _png_bytes(size=(100, 50), color="red", orientation=None, fmt="PNG") -> bytes:
    img = Image.new("RGB", size, color)
    buf = io.BytesIO()
    if orientation is not None:
        exif = img.getexif()
        exif[0x0112] = orientation
        img.save(buf, format=fmt, exif=exif)
    else:
        img.save(buf, format=fmt)
    return buf.getvalue()


def test_decode_image_reads_embedded_bitmap():
    decoded = image_loader.decode_image(load_resource_bytes("images/placeholder.bmp"))
    assert (decoded.width, decoded.height) == (8, 4)
    assert decoded.mode == "RGB"
    assert len(decoded.pixels) == 8 * 4 * 3
    assert decoded.size == Size(8, 4)


def test_decode_image_reads_embedded_cursor():
    decoded = image_loader.decode_image(load_resource_bytes("cursors/crosshair.cur"))
    assert decoded.size == Size(32, 32)


def test_decode_image_applies_exif_orientation():
    # Orientation 6 means the stored 100x50 pixels are displayed rotated 90 degrees.
    decoded = image_loader.decode_image(_png_bytes(orientation=6, fmt="JPEG"))
    assert decoded.size == Size(50, 100)


def test_decode_image_rejects_garbage():
    with pytest.raises(ImageDecodeError):
        image_loader.decode_image(b"definitely not an image")


def test_qimage_from_bytes_decodes_png():
    image = image_loader.qimage_from_bytes(_png_bytes(size=(12, 7)))
    assert image is not None
    assert (image.width(), image.height()) == (12, 7)


def test_qimage_from_bytes_returns_none_for_garbage():
    assert image_loader.qimage_from_bytes(b"\x00garbage\x00") is None


def test_qimage_from_pil_success():
    qimg = image_loader.qimage_from_pil(Image.new("RGB", (10, 6), color="red"))
    assert isinstance(qimg, QImage)
    assert (qimg.width(), qimg.height()) == (10, 6)
    assert qimg.pixelColor(0, 0).name() == "#ff0000"


def test_qimage_from_pil_handles_missing_imageqt(monkeypatch):
    monkeypatch.setattr(image_loader, "_ImageQt", None)
    assert image_loader.qimage_from_pil(Image.new("RGB", (10, 10))) is None


def test_qimage_from_pil_handles_exception(monkeypatch):
    monkeypatch.setattr(image_loader, "_ImageQt", MagicMock(side_effect=Exception("Conversion failed")))
    assert image_loader.qimage_from_pil(Image.new("RGB", (10, 10))) is None


def test_load_image_resource():
    image = image_loader.load_image_resource("images/placeholder.bmp")
    assert (image.width(), image.height()) == (8, 4)
    assert image.pixelColor(3, 2).name() == "#c0c0c0"


def test_load_image_resource_missing():
    with pytest.raises(ResourceNotFoundError):
        image_loader.load_image_resource("images/missing.bmp")


def test_load_image_resource_undecodable(monkeypatch):
    monkeypatch.setattr(image_loader, "load_resource_bytes", lambda name, package: b"junk")
    with pytest.raises(ImageDecodeError):
        image_loader.load_image_resource("images/placeholder.bmp")


@pytest.mark.parametrize(
    ("source", "height", "expected"),
    [
        (Size(400, 200), 96, Size(192, 96)),
        (Size(300, 200), 50, Size(75, 50)),
        # 90 * 0.25 = 22.5 is truncated
        (Size(100, 400), 90, Size(22, 90)),
        (Size(64, 64), 16, Size(16, 16)),
        # single precision ratios: 1/49 and 1/41 round differently than in double
        (Size(1, 49), 49, Size(1, 49)),
        (Size(1, 41), 41, Size(0, 41)),
        (Size(1, 49), 147, Size(3, 147)),
    ],
)
def test_thumbnail_size(source, height, expected):
    assert image_loader.thumbnail_size(source, height) == expected


@pytest.mark.parametrize(("source", "height"), [(Size(10, 10), 0), (Size(0, 10), 5), (Size(10, 0), 5)])
def test_thumbnail_size_rejects_invalid_input(source, height):
    with pytest.raises(InvalidArgumentError):
        image_loader.thumbnail_size(source, height)


def test_create_thumbnail_scales_to_height():
    image = QImage(400, 200, QImage.Format.Format_RGB32)
    image.fill(QColor("green"))
    thumb = image_loader.create_thumbnail(image, 50)
    assert (thumb.width(), thumb.height()) == (100, 50)
    assert thumb.pixelColor(50, 25).name() == QColor("green").name()


def test_create_thumbnail_rejects_null_image():
    with pytest.raises(InvalidArgumentError):
        image_loader.create_thumbnail(QImage(), 50)


def test_create_thumbnail_rejects_zero_width():
    image = QImage(1, 200, QImage.Format.Format_RGB32)
    image.fill(QColor("green"))
    with pytest.raises(InvalidArgumentError):
        image_loader.create_thumbnail(image, 50)
