from pathlib import Path
from typing import Optional
from PIL import Image, ImageOps
import logging

from picturebox.application.interfaces import IThumbnailGenerator
from picturebox.domain.models.geometry import Size
from picturebox.errors import InvalidArgumentError
from picturebox.utils.image_loader import thumbnail_size

LOGGER = logging.getLogger(__name__)


class PillowThumbnailGenerator(IThumbnailGenerator):
    """
    Generates fixed-height thumbnails using Pillow.
    """

    def generate(self, path: Path, height: int) -> Optional[Image.Image]:
        """
        Generate a thumbnail for the image at *path* that is *height* pixels tall.
        Returns a PIL Image object or None on failure.
        """
        if height <= 0:
            raise InvalidArgumentError(f"thumbnail height must be positive, got {height}")
        try:
            with Image.open(path) as img:
                img = ImageOps.exif_transpose(img)
                if img.mode not in ("RGB", "RGBA"):
                    img = img.convert("RGBA")
                size = thumbnail_size(Size(img.width, img.height), height)
                if size.width <= 0:
                    LOGGER.warning(f"Thumbnail of {path} would be zero pixels wide")
                    return None
                return img.resize((size.width, size.height), Image.Resampling.LANCZOS)
        except InvalidArgumentError as e:
            LOGGER.warning(f"Cannot create thumbnail for {path}: {e}")
            return None
        except Exception as e:
            LOGGER.warning(f"Pillow failed to open {path}: {e}")
            return None

    def save(self, source: Path, destination: Path, height: int) -> bool:
        thumb = self.generate(source, height)
        if thumb is None:
            return False
        # JPEG has no alpha channel
        if destination.suffix.lower() in {".jpg", ".jpeg"} and thumb.mode != "RGB":
            thumb = thumb.convert("RGB")
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            thumb.save(destination)
        except (OSError, ValueError) as e:
            LOGGER.warning(f"Failed to write thumbnail {destination}: {e}")
            return False
        LOGGER.debug(f"Wrote {thumb.width}x{thumb.height} thumbnail to {destination}")
        return True
