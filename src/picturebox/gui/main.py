"""GUI entry point for the picture box viewer."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QApplication,
    QCheckBox,
    QMainWindow,
    QVBoxLayout,
    QWidget,
)

from ..config import VIEWER_WINDOW_DEFAULT_SIZE, VIEWER_WINDOW_TITLE
from ..errors import SettingsError
from ..settings import SettingsManager
from ..utils.image_loader import qimage_from_bytes
from .ui.widgets import ScalablePictureBox
from .utils.console_logger import ensure_console_logger

_LOGGER = logging.getLogger(__name__)


class ViewerWindow(QMainWindow):
    """Top-level window hosting a single :class:`ScalablePictureBox`."""

    def __init__(self, settings: SettingsManager, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._settings = settings
        self.setWindowTitle(VIEWER_WINDOW_TITLE)
        self.resize(*VIEWER_WINDOW_DEFAULT_SIZE)

        self.picture_box = ScalablePictureBox(
            self,
            stretch_to_fit=bool(settings.get("display.stretch_to_fit", False)),
            cursor_resource=settings.get("display.cursor_resource"),
        )
        self.picture_box.setBackgroundColor(QColor(settings.get("display.background_color")))
        self.picture_box.setPlaceholderVisible(bool(settings.get("display.show_placeholder", True)))

        self.stretch_checkbox = QCheckBox("Stretch to fit", self)
        self.stretch_checkbox.setChecked(self.picture_box.stretchToFit())
        self.stretch_checkbox.toggled.connect(self.picture_box.setStretchToFit)
        self.picture_box.stretchToFitChanged.connect(self._persist_stretch)

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.picture_box, 1)
        layout.addWidget(self.stretch_checkbox)
        self.setCentralWidget(central)

    def open_image(self, path: Path) -> bool:
        """Display the image stored at *path*; return ``False`` if it cannot be read."""

        try:
            data = path.read_bytes()
        except OSError as exc:
            _LOGGER.error("Unable to read %s: %s", path, exc)
            return False
        image = qimage_from_bytes(data)
        if image is None or image.isNull():
            _LOGGER.error("Unsupported image file: %s", path)
            return False
        self.picture_box.setImage(image)
        self.setWindowTitle(f"{path.name} - {VIEWER_WINDOW_TITLE}")
        try:
            self._settings.set("last_opened_image", str(path))
        except SettingsError as exc:
            _LOGGER.warning("Could not remember last image: %s", exc)
        return True

    def _persist_stretch(self, enabled: bool) -> None:
        try:
            self._settings.set("display.stretch_to_fit", enabled)
        except SettingsError as exc:
            _LOGGER.warning("Could not persist stretch setting: %s", exc)


def main(argv: list[str] | None = None) -> int:
    """Launch the Qt application and return the exit code."""

    arguments = list(sys.argv if argv is None else argv)
    ensure_console_logger(logging.getLogger("picturebox"), "picturebox-gui")
    app = QApplication(arguments)

    settings = SettingsManager()
    try:
        settings.load()
    except SettingsError as exc:
        _LOGGER.warning("Using default settings: %s", exc)

    window = ViewerWindow(settings)
    window.show()
    if len(arguments) > 1:
        window.open_image(Path(arguments[1]))
    return app.exec()


if __name__ == "__main__":  # pragma: no cover - manual launch
    raise SystemExit(main())
