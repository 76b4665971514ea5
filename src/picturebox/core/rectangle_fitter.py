"""Best-fit placement of an image inside a display area.

The two branches deliberately use different numeric strategies:

* When the image is smaller than the display area in both dimensions the
  scale factor is computed with single precision floats and truncated, which
  is how the picture box has always upscaled stretched images.
* Otherwise the binding dimension is chosen with an integer cross
  multiplication (``a * d`` versus ``b * c``) and the free dimension is derived
  with truncating integer division.

Merging both into one floating point formula changes the result by a pixel
for some sizes, so the arithmetic below is kept exactly as is.
"""

from __future__ import annotations

import numpy as np

from ..domain.models.geometry import Rect, Size
from ..errors import InvalidArgumentError


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def fit(image_size: Size, target_area: Rect, stretch_to_fit: bool) -> Rect:
    """Return the rectangle in which an image of *image_size* should be drawn.

    Args:
        image_size (Size): Pixel dimensions of the source image. Both values
            must be positive.
        target_area (Rect): The display area, in the caller's coordinates.
        stretch_to_fit (bool): Upscale images that are smaller than
            *target_area* in both dimensions while keeping their aspect ratio.
            Without it such images keep their native size and are centred.

    Returns:
        Rect: The destination rectangle, offset from the origin of
            *target_area*.

    Raises:
        InvalidArgumentError: If either image dimension is not positive.
    """
    image_w, image_h = image_size.width, image_size.height
    if image_w <= 0 or image_h <= 0:
        raise InvalidArgumentError(
            f"image size must be positive, got {image_w}x{image_h}"
        )

    target_w, target_h = target_area.width, target_area.height

    if image_w < target_w and image_h < target_h:
        if stretch_to_fit:
            width_ratio = np.float32(target_w) / np.float32(image_w)
            height_ratio = np.float32(target_h) / np.float32(image_h)
            min_ratio = min(width_ratio, height_ratio)
            width = int(np.float32(image_w) * min_ratio)
            height = int(np.float32(image_h) * min_ratio)
            x, y = target_area.x, target_area.y
            if width < target_w:
                x += _trunc_div(target_w - width, 2)
            if height < target_h:
                y += _trunc_div(target_h - height, 2)
            return Rect(x, y, width, height)

        # Native size, centred.  Both margins are positive in this branch.
        return Rect.from_origin_size(
            target_area.x + _trunc_div(target_w - image_w, 2),
            target_area.y + _trunc_div(target_h - image_h, 2),
            image_size,
        )

    x, y, width, height = target_area.as_tuple()
    if image_w * height > image_h * width:
        # The image is wider than the area: keep the width, centre vertically.
        height = _trunc_div(width * image_h, image_w)
        y += _trunc_div(target_h - height, 2)
    else:
        # Keep the height, centre horizontally.
        width = _trunc_div(height * image_w, image_h)
        x += _trunc_div(target_w - width, 2)
    return Rect(x, y, width, height)


__all__ = ["fit"]
