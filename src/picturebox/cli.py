"""Typer-based CLI entry point."""

from __future__ import annotations

import functools
import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from jsonschema import ValidationError
from rich import print

from picturebox.config import DEFAULT_THUMBNAIL_HEIGHT
from picturebox.core.rectangle_fitter import fit as fit_rect
from picturebox.domain.models.geometry import Rect, Size
from picturebox.errors import PictureBoxError
from picturebox.gui.utils.console_logger import ensure_console_logger
from picturebox.infrastructure.services.thumbnail_generator import PillowThumbnailGenerator
from picturebox.resources import load_resource_bytes
from picturebox.settings.manager import default_settings_path
from picturebox.settings.schema import merge_with_defaults
from picturebox.utils.image_loader import decode_image
from picturebox.utils.jsonio import read_json

LOGGER = logging.getLogger("picturebox")

app = typer.Typer(help="Image fitting, thumbnail and resource helpers for the picture box")


def _handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except PictureBoxError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc

    return wrapper


def _parse_size(value: str) -> Size:
    parts = value.lower().split("x")
    if len(parts) != 2:
        raise typer.BadParameter(f"expected WIDTHxHEIGHT, got {value!r}")
    try:
        return Size(int(parts[0]), int(parts[1]))
    except ValueError as exc:
        raise typer.BadParameter(f"expected integers in {value!r}") from exc


def _parse_rect(value: str) -> Rect:
    parts = value.split(",")
    if len(parts) != 4:
        raise typer.BadParameter(f"expected X,Y,WIDTH,HEIGHT, got {value!r}")
    try:
        x, y, width, height = (int(part) for part in parts)
    except ValueError as exc:
        raise typer.BadParameter(f"expected integers in {value!r}") from exc
    if width < 0 or height < 0:
        raise typer.BadParameter("target width and height must not be negative")
    return Rect(x, y, width, height)


def _configured_thumbnail_height() -> int:
    """Return the thumbnail height from the settings file without rewriting it."""

    path = default_settings_path()
    if not path.exists():
        return DEFAULT_THUMBNAIL_HEIGHT
    try:
        payload = read_json(path)
        if not isinstance(payload, dict):
            raise ValueError("expected a JSON object")
        settings = merge_with_defaults(payload)
    except (OSError, ValueError, ValidationError) as exc:
        LOGGER.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return DEFAULT_THUMBNAIL_HEIGHT
    return int(settings["thumbnail"]["height"])


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    ensure_console_logger(
        LOGGER,
        "picturebox-cli",
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
    )


@app.command()
@_handle_errors
def fit(
    image: str = typer.Argument(..., help="Image size as WIDTHxHEIGHT."),
    area: str = typer.Argument(..., help="Target area as X,Y,WIDTH,HEIGHT."),
    stretch: bool = typer.Option(False, "--stretch", help="Enlarge images smaller than the area."),
) -> None:
    """Print the rectangle an image is drawn into."""

    result = fit_rect(_parse_size(image), _parse_rect(area), stretch)
    print(f"{result.x},{result.y},{result.width},{result.height}")


@app.command()
@_handle_errors
def thumbnail(
    source: Path = typer.Argument(..., exists=True, dir_okay=False),
    destination: Path = typer.Argument(...),
    height: Optional[int] = typer.Option(None, "--height", min=1, help="Thumbnail height in pixels."),
) -> None:
    """Write a fixed-height thumbnail of SOURCE to DESTINATION."""

    target_height = height if height is not None else _configured_thumbnail_height()
    if not PillowThumbnailGenerator().save(source, destination, target_height):
        typer.echo(f"Error: could not create a thumbnail of {source}", err=True)
        raise typer.Exit(1)
    print(f"[green]Wrote {destination}")


@app.command()
@_handle_errors
def resource(
    name: str = typer.Argument(..., help="Resource name, e.g. cursors/crosshair.cur."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the raw bytes here."),
) -> None:
    """Inspect or extract an embedded resource."""

    data = load_resource_bytes(name)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(data)
        print(f"[green]Wrote {len(data)} bytes to {output}")
        return
    decoded = decode_image(data)
    size = decoded.size
    print(f"{name}: {len(data)} bytes, {size.width}x{size.height} {decoded.mode}")


if __name__ == "__main__":  # pragma: no cover
    app()
