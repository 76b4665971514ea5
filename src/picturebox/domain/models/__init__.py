from .geometry import Rect, Size

__all__ = ["Rect", "Size"]
