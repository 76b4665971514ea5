"""Reusable Qt widgets for the picturebox GUI."""

from .scalable_picture_box import ScalablePictureBox

__all__ = ["ScalablePictureBox"]
