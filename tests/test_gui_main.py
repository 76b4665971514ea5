from __future__ import annotations

import io
import json
import logging
import os
from pathlib import Path

import pytest
from PySide6.QtGui import QColor, QImage
from PySide6.QtWidgets import QApplication

from picturebox.gui.main import ViewerWindow
from picturebox.gui.utils.console_logger import ensure_console_logger
from picturebox.settings import SettingsManager


@pytest.fixture(scope="module")
def qapp() -> QApplication:
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def settings(tmp_path: Path) -> SettingsManager:
    manager = SettingsManager(tmp_path / "settings.json")
    manager.load()
    return manager


@pytest.fixture
def window(qapp, settings):
    viewer = ViewerWindow(settings)
    yield viewer
    viewer.deleteLater()


def _write_png(path: Path, width: int = 60, height: int = 30) -> Path:
    image = QImage(width, height, QImage.Format.Format_RGB32)
    image.fill(QColor("blue"))
    assert image.save(str(path), "PNG")
    return path


def test_window_applies_settings(qapp, tmp_path: Path):
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps(
            {
                "display": {
                    "stretch_to_fit": True,
                    "background_color": "#336699",
                    "show_placeholder": False,
                }
            }
        ),
        encoding="utf-8",
    )
    manager = SettingsManager(path)
    manager.load()
    viewer = ViewerWindow(manager)
    assert viewer.picture_box.stretchToFit() is True
    assert viewer.stretch_checkbox.isChecked() is True
    assert viewer.picture_box.backgroundColor() == QColor("#336699")
    assert viewer.picture_box.placeholderVisible() is False
    viewer.deleteLater()


def test_window_shows_placeholder_by_default(window):
    assert window.picture_box.placeholderVisible() is True
    assert window.picture_box.image() is None


def test_open_image_displays_and_remembers(window, settings, tmp_path: Path):
    image_path = _write_png(tmp_path / "photo.png")
    assert window.open_image(image_path) is True
    assert window.picture_box.image() is not None
    assert window.picture_box.image().width() == 60
    assert window.windowTitle().startswith("photo.png")
    assert settings.get("last_opened_image") == str(image_path)


def test_open_image_rejects_missing_file(window, settings, tmp_path: Path):
    assert window.open_image(tmp_path / "missing.png") is False
    assert window.picture_box.image() is None
    assert settings.get("last_opened_image") is None


def test_open_image_rejects_garbage(window, tmp_path: Path):
    path = tmp_path / "garbage.png"
    path.write_bytes(b"definitely not an image")
    assert window.open_image(path) is False
    assert window.picture_box.image() is None


def test_stretch_checkbox_is_persisted(window, settings):
    window.stretch_checkbox.setChecked(True)
    assert window.picture_box.stretchToFit() is True
    assert settings.get("display.stretch_to_fit") is True
    stored = json.loads(settings.path.read_text(encoding="utf-8"))
    assert stored["display"]["stretch_to_fit"] is True


def test_console_logger_installs_one_handler(monkeypatch):
    logger = logging.getLogger("picturebox.tests.console")
    first = io.StringIO()
    monkeypatch.setattr("sys.stdout", first)
    ensure_console_logger(logger, "test-console")
    second = io.StringIO()
    monkeypatch.setattr("sys.stdout", second)
    ensure_console_logger(logger, "test-console", level=logging.DEBUG)
    try:
        named = [handler for handler in logger.handlers if handler.name == "test-console"]
        assert len(named) == 1
        assert logger.level == logging.DEBUG
        logger.debug("hello console")
        assert "hello console" in second.getvalue()
        assert first.getvalue() == ""
    finally:
        for handler in named:
            logger.removeHandler(handler)


def test_console_logger_writes_to_given_stream():
    logger = logging.getLogger("picturebox.tests.stream")
    target = io.StringIO()
    ensure_console_logger(logger, "test-stream", level=logging.WARNING, stream=target)
    try:
        logger.warning("to the chosen stream")
        assert "to the chosen stream" in target.getvalue()
    finally:
        for handler in list(logger.handlers):
            if handler.name == "test-stream":
                logger.removeHandler(handler)
