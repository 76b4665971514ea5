"""Persisted viewer preferences backed by a validated JSON document."""

from __future__ import annotations

import logging
import os
import sys
from copy import deepcopy
from pathlib import Path
from typing import Any

from jsonschema import ValidationError
from PySide6.QtCore import QObject, Signal, Slot

from ..config import SETTINGS_DIR_NAME, SETTINGS_FILE_NAME
from ..errors import SettingsLoadError, SettingsValidationError
from ..utils.jsonio import read_json, write_json
from .schema import DEFAULT_SETTINGS, merge_with_defaults

_LOGGER = logging.getLogger(__name__)

_MISSING = object()


def _config_root() -> Path:
    if os.name == "nt":
        appdata = os.environ.get("APPDATA")
        return Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.environ.get("XDG_CONFIG_HOME")
    return Path(xdg) if xdg else Path.home() / ".config"


def default_settings_path() -> Path:
    """Return the per-user settings file location for this platform."""

    return _config_root() / SETTINGS_DIR_NAME / SETTINGS_FILE_NAME


def _lookup(data: dict[str, Any], parts: list[str]) -> Any:
    node: Any = data
    for part in parts:
        if not isinstance(node, dict):
            return _MISSING
        node = node.get(part, _MISSING)
        if node is _MISSING:
            break
    return node


def _assign(data: dict[str, Any], parts: list[str], value: Any) -> None:
    *parents, leaf = parts
    node = data
    for part in parents:
        child = node.get(part)
        if not isinstance(child, dict):
            child = node[part] = {}
        node = child
    node[leaf] = value


class SettingsManager(QObject):
    """Keep the viewer preferences in memory and mirror every change to disk.

    Keys are dotted paths into the nested document, e.g.
    ``"display.stretch_to_fit"``.  Each accepted change emits
    :attr:`settingsChanged` with the key and its new value.
    """

    settingsChanged = Signal(str, object)

    def __init__(self, path: Path | None = None) -> None:
        super().__init__()
        self._path = path
        self._data: dict[str, Any] = deepcopy(DEFAULT_SETTINGS)

    @property
    def path(self) -> Path:
        if self._path is None:
            self._path = default_settings_path()
        return self._path

    def load(self) -> None:
        """Read the settings file, fill in defaults and write the result back.

        A missing file yields the defaults.  Unreadable JSON raises
        :class:`SettingsLoadError`; values violating the schema raise
        :class:`SettingsValidationError`.
        """

        payload: dict[str, Any] | None = None
        if self.path.exists():
            try:
                raw = read_json(self.path)
            except (OSError, ValueError) as exc:
                raise SettingsLoadError(f"{self.path}: {exc}") from exc
            if not isinstance(raw, dict):
                raise SettingsLoadError(f"{self.path}: top-level value must be an object")
            payload = raw
        try:
            self._data = merge_with_defaults(payload)
        except ValidationError as exc:
            raise SettingsValidationError(exc.message) from exc
        _LOGGER.debug("Loaded settings from %s", self.path)
        write_json(self.path, self._data)

    def get(self, key: str, default: Any | None = None) -> Any:
        value = _lookup(self._data, key.split("."))
        return default if value is _MISSING else value

    @Slot(str, "QVariant")
    def set(self, key: str, value: Any) -> None:
        """Store *value* under *key*, persist it and notify listeners.

        Rejected values raise :class:`SettingsValidationError` and leave the
        stored settings unchanged.
        """

        if isinstance(value, Path):
            value = str(value)
        candidate = deepcopy(self._data)
        _assign(candidate, key.split("."), value)
        try:
            validated = merge_with_defaults(candidate)
        except ValidationError as exc:
            raise SettingsValidationError(f"{key}: {exc.message}") from exc
        self._data = validated
        write_json(self.path, self._data)
        self.settingsChanged.emit(key, value)


__all__ = ["SettingsManager", "default_settings_path"]
