from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Size:
    """Width and height in pixels."""

    width: int
    height: int

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in widget coordinates.

    ``x`` and ``y`` are on-screen offsets and may be negative when the display
    area is partially scrolled out of view.
    """

    x: int
    y: int
    width: int
    height: int

    @classmethod
    def from_origin_size(cls, x: int, y: int, size: Size) -> Rect:
        return cls(x, y, size.width, size.height)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def contains_rect(self, other: Rect) -> bool:
        """Return ``True`` when *other* lies entirely within this rectangle."""
        return (
            other.x >= self.x
            and other.y >= self.y
            and other.x + other.width <= self.x + self.width
            and other.y + other.height <= self.y + self.height
        )

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.width, self.height)
