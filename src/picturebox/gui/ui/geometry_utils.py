"""Geometry utility functions for UI layout."""

from __future__ import annotations

from typing import Protocol, Union

from PySide6.QtCore import QRect, QSize

from ...core.rectangle_fitter import fit
from ...domain.models.geometry import Rect, Size
from ...errors import InvalidArgumentError


class _Sized(Protocol):
    def size(self) -> QSize: ...


ImageLike = Union[QSize, _Sized]


def size_from_qt(size: QSize) -> Size:
    return Size(size.width(), size.height())


def rect_from_qt(rect: QRect) -> Rect:
    return Rect(rect.x(), rect.y(), rect.width(), rect.height())


def rect_to_qt(rect: Rect) -> QRect:
    return QRect(rect.x, rect.y, rect.width, rect.height)


def scale_to_fit(image: ImageLike, target_area: QRect, stretch_to_fit: bool) -> QRect:
    """
    Calculate the rectangle in which *image* should be painted inside *target_area*.

    Images smaller than the target in both dimensions keep their native size
    and are centred unless ``stretch_to_fit`` is set, in which case they are
    enlarged while keeping their aspect ratio.  Larger images are always shrunk
    to fit and centred along the free axis.

    Args:
        image (QSize | QImage | QPixmap): The image, or its size, in pixels.
        target_area (QRect): The display area in widget coordinates.
        stretch_to_fit (bool): Whether small images are enlarged.

    Returns:
        QRect: The destination rectangle in widget coordinates.

    Raises:
        InvalidArgumentError: If the image is null or has an empty size.
    """
    size = image if isinstance(image, QSize) else image.size()
    if size.isEmpty():
        raise InvalidArgumentError(
            f"cannot fit an empty {size.width()}x{size.height()} image"
        )
    result = fit(size_from_qt(size), rect_from_qt(target_area), stretch_to_fit)
    return rect_to_qt(result)
