"""JSON schema and defaults for ``settings.json``."""

from __future__ import annotations

import os
from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from ..config import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_CURSOR_RESOURCE,
    DEFAULT_STRETCH_TO_FIT,
    DEFAULT_THUMBNAIL_HEIGHT,
    SETTINGS_SCHEMA_ID,
)

_HEX_COLOR = "^#[0-9A-Fa-f]{6}$"
_MAX_THUMBNAIL_HEIGHT = 4096


def _section(**properties: Any) -> dict[str, Any]:
    return {"type": "object", "properties": properties, "additionalProperties": True}


SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "picturebox/settings.schema.json",
    "type": "object",
    "required": ["schema", "display", "thumbnail"],
    "properties": {
        "schema": {"const": SETTINGS_SCHEMA_ID},
        "display": _section(
            stretch_to_fit={"type": "boolean"},
            background_color={"type": "string", "pattern": _HEX_COLOR},
            cursor_resource={"type": ["string", "null"]},
            show_placeholder={"type": "boolean"},
        ),
        "thumbnail": _section(
            height={"type": "integer", "minimum": 1, "maximum": _MAX_THUMBNAIL_HEIGHT},
        ),
        "last_opened_image": {"type": ["string", "null"]},
    },
    "additionalProperties": True,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": SETTINGS_SCHEMA_ID,
    "display": {
        "stretch_to_fit": DEFAULT_STRETCH_TO_FIT,
        "background_color": DEFAULT_BACKGROUND_COLOR,
        "cursor_resource": DEFAULT_CURSOR_RESOURCE,
        "show_placeholder": True,
    },
    "thumbnail": {"height": DEFAULT_THUMBNAIL_HEIGHT},
    "last_opened_image": None,
}

_validator = Draft202012Validator(SETTINGS_SCHEMA)


def _coerce_path(value: Any) -> Any:
    if value is None or value == "" or isinstance(value, str):
        return value or None
    try:
        return os.fspath(value)
    except TypeError:
        return value


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Overlay *data* on :data:`DEFAULT_SETTINGS` and validate the result.

    Sections that are objects in the defaults are merged key by key so a
    partial ``display`` block keeps the remaining defaults.  Unknown keys are
    preserved.  Raises :class:`jsonschema.ValidationError` on invalid values.
    """

    merged = deepcopy(DEFAULT_SETTINGS)
    for key, value in (data or {}).items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            current.update(value)
        elif key == "last_opened_image":
            merged[key] = _coerce_path(value)
        else:
            merged[key] = value
    validate_settings(merged)
    return merged


def validate_settings(data: dict[str, Any]) -> None:
    """Raise :class:`jsonschema.ValidationError` if *data* is not a valid settings document."""

    _validator.validate(data)


__all__ = ["DEFAULT_SETTINGS", "SETTINGS_SCHEMA", "merge_with_defaults", "validate_settings"]
