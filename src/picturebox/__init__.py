"""Helpers for a scalable picture box image display control."""

from .core.rectangle_fitter import fit
from .domain.models.geometry import Rect, Size
from .errors import (
    CursorCreationError,
    ImageDecodeError,
    InvalidArgumentError,
    PictureBoxError,
    ResourceNotFoundError,
)
from .resources import load_resource_bytes, resource_exists
from .utils.image_loader import DecodedImage, decode_image

__version__ = "0.1.0"

__all__ = [
    "CursorCreationError",
    "DecodedImage",
    "ImageDecodeError",
    "InvalidArgumentError",
    "PictureBoxError",
    "Rect",
    "ResourceNotFoundError",
    "Size",
    "decode_image",
    "fit",
    "load_resource_bytes",
    "resource_exists",
]
