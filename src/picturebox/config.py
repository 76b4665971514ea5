"""Default configuration values for picturebox."""

from __future__ import annotations

from typing import Final

# Package that carries the bundled cursor and bitmap files.  Resource names are
# resolved relative to this package through ``importlib.resources`` so they keep
# working when the project is installed as a zipped wheel.
RESOURCE_PACKAGE: Final[str] = "picturebox.resources"
DEFAULT_CURSOR_RESOURCE: Final[str] = "cursors/crosshair.cur"
PLACEHOLDER_IMAGE_RESOURCE: Final[str] = "images/placeholder.bmp"

CUR_FILE_SUFFIX: Final[str] = ".cur"

SETTINGS_DIR_NAME: Final[str] = "picturebox"
SETTINGS_FILE_NAME: Final[str] = "settings.json"
SETTINGS_SCHEMA_ID: Final[str] = "picturebox/settings@1"

DEFAULT_THUMBNAIL_HEIGHT: Final[int] = 96
DEFAULT_BACKGROUND_COLOR: Final[str] = "#1e1e1e"
DEFAULT_STRETCH_TO_FIT: Final[bool] = False

# ---------------------------------------------------------------------------
# GUI window defaults
# ---------------------------------------------------------------------------

VIEWER_WINDOW_DEFAULT_SIZE: Final[tuple[int, int]] = (800, 600)
VIEWER_WINDOW_TITLE: Final[str] = "Picture Box"
