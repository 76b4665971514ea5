from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional


class IThumbnailGenerator(ABC):
    """Interface for generating thumbnails."""

    @abstractmethod
    def generate(self, path: Path, height: int) -> Optional[Any]:
        """
        Generate a thumbnail of the image at *path* that is *height* pixels tall.
        Returns an image object or None on failure.
        """
        pass

    @abstractmethod
    def save(self, source: Path, destination: Path, height: int) -> bool:
        """Generate a thumbnail for *source* and write it to *destination*."""
        pass
