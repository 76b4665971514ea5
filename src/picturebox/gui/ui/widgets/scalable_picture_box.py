"""Widget that paints a single image scaled into its contents rectangle."""

from __future__ import annotations

import logging
from typing import Optional, Union

from PySide6.QtCore import QRect, QSize, Qt, Signal
from PySide6.QtGui import QColor, QImage, QPainter, QPaintEvent, QPixmap
from PySide6.QtWidgets import QSizePolicy, QWidget

from ....config import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_CURSOR_RESOURCE,
    DEFAULT_STRETCH_TO_FIT,
    PLACEHOLDER_IMAGE_RESOURCE,
)
from ....errors import CursorCreationError, ImageDecodeError, ResourceNotFoundError
from ....utils.image_loader import load_image_resource
from ..cursors import create_cursor_from_resource
from ..geometry_utils import scale_to_fit

_LOGGER = logging.getLogger(__name__)

_DEFAULT_SIZE_HINT = QSize(320, 240)


class ScalablePictureBox(QWidget):
    """Display an image centred in the widget, shrinking it when it does not fit.

    Small images keep their native size unless stretch-to-fit is enabled. The
    optional placeholder bitmap is always stretched so it fills the widget.
    """

    imageChanged = Signal()
    stretchToFitChanged = Signal(bool)

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        *,
        stretch_to_fit: bool = DEFAULT_STRETCH_TO_FIT,
        cursor_resource: Optional[str] = DEFAULT_CURSOR_RESOURCE,
    ) -> None:
        super().__init__(parent)
        self._pixmap: Optional[QPixmap] = None
        self._stretch_to_fit = bool(stretch_to_fit)
        self._background = QColor(DEFAULT_BACKGROUND_COLOR)
        self._placeholder: Optional[QPixmap] = None
        self._placeholder_visible = False

        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent, True)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        if cursor_resource:
            self.setCursorResource(cursor_resource)

    # ------------------------------------------------------------------
    # Image
    # ------------------------------------------------------------------
    def setImage(self, image: Union[QImage, QPixmap, None]) -> None:
        """Show *image*, or clear the widget when ``None`` or null is passed."""

        if isinstance(image, QImage):
            pixmap = None if image.isNull() else QPixmap.fromImage(image)
        else:
            pixmap = image
        if pixmap is not None and pixmap.isNull():
            pixmap = None
        self._pixmap = pixmap
        self.updateGeometry()
        self.update()
        self.imageChanged.emit()

    def image(self) -> Optional[QPixmap]:
        return self._pixmap

    def clear(self) -> None:
        self.setImage(None)

    # ------------------------------------------------------------------
    # Display options
    # ------------------------------------------------------------------
    def setStretchToFit(self, enabled: bool) -> None:
        enabled = bool(enabled)
        if enabled == self._stretch_to_fit:
            return
        self._stretch_to_fit = enabled
        self.update()
        self.stretchToFitChanged.emit(enabled)

    def stretchToFit(self) -> bool:
        return self._stretch_to_fit

    def setBackgroundColor(self, color: QColor) -> None:
        self._background = QColor(color)
        self.update()

    def backgroundColor(self) -> QColor:
        return QColor(self._background)

    def setCursorResource(self, name: str) -> bool:
        """Use the embedded cursor *name*; keep the current cursor on failure."""

        try:
            self.setCursor(create_cursor_from_resource(name))
        except (CursorCreationError, ResourceNotFoundError) as exc:
            _LOGGER.warning("Keeping default cursor, %s could not be loaded: %s", name, exc)
            return False
        return True

    def setPlaceholderVisible(self, visible: bool) -> None:
        visible = bool(visible)
        if visible and self._placeholder is None:
            try:
                self._placeholder = QPixmap.fromImage(
                    load_image_resource(PLACEHOLDER_IMAGE_RESOURCE)
                )
            except (ImageDecodeError, ResourceNotFoundError) as exc:
                _LOGGER.warning("Placeholder image unavailable: %s", exc)
                visible = False
        self._placeholder_visible = visible
        self.update()

    def placeholderVisible(self) -> bool:
        return self._placeholder_visible

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    def _display_pixmap(self) -> tuple[Optional[QPixmap], bool]:
        if self._pixmap is not None:
            return self._pixmap, self._stretch_to_fit
        if self._placeholder_visible and self._placeholder is not None:
            return self._placeholder, True
        return None, self._stretch_to_fit

    def imageRect(self) -> QRect:
        """Return the widget rectangle the current image is painted into."""

        pixmap, stretch = self._display_pixmap()
        if pixmap is None:
            return QRect()
        area = self.contentsRect()
        if area.isEmpty():
            return QRect()
        return scale_to_fit(pixmap, area, stretch)

    def sizeHint(self) -> QSize:  # noqa: N802 - Qt override
        if self._pixmap is not None:
            return self._pixmap.size()
        return QSize(_DEFAULT_SIZE_HINT)

    # ------------------------------------------------------------------
    # Painting
    # ------------------------------------------------------------------
    def paintEvent(self, event: QPaintEvent) -> None:  # noqa: N802 - Qt override
        painter = QPainter(self)
        painter.fillRect(event.rect(), self._background)
        pixmap, _ = self._display_pixmap()
        target = self.imageRect()
        if pixmap is not None and not target.isEmpty():
            painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
            painter.drawPixmap(target, pixmap)
        painter.end()


__all__ = ["ScalablePictureBox"]
