"""Custom exception hierarchy for picturebox."""

from __future__ import annotations


class PictureBoxError(Exception):
    """Base class for all custom errors raised by picturebox."""


class InvalidArgumentError(PictureBoxError, ValueError):
    """Raised when a geometry or sizing helper receives an unusable argument."""


class ResourceNotFoundError(PictureBoxError, FileNotFoundError):
    """Raised when an embedded resource cannot be located."""


class ImageDecodeError(PictureBoxError):
    """Raised when image bytes cannot be decoded by Qt or Pillow."""


class CursorCreationError(PictureBoxError):
    """Raised when cursor data cannot be turned into a usable cursor."""


class SettingsError(PictureBoxError):
    """Base class for settings related failures."""


class SettingsLoadError(SettingsError):
    """Raised when the settings file cannot be parsed or loaded."""


class SettingsValidationError(SettingsError):
    """Raised when settings data fails schema validation."""


__all__ = [
    "CursorCreationError",
    "ImageDecodeError",
    "InvalidArgumentError",
    "PictureBoxError",
    "ResourceNotFoundError",
    "SettingsError",
    "SettingsLoadError",
    "SettingsValidationError",
]
