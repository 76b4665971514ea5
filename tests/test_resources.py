from __future__ import annotations

from pathlib import Path

import pytest

from picturebox.errors import ResourceNotFoundError
from picturebox.resources import load_resource_bytes, resource_exists


def test_cursor_resource_is_a_cur_file():
    data = load_resource_bytes("cursors/crosshair.cur")
    assert data[:4] == b"\x00\x00\x02\x00"
    assert len(data) == 326


def test_manifest_style_names_resolve_to_same_file():
    assert load_resource_bytes("cursors.crosshair.cur") == load_resource_bytes("cursors/crosshair.cur")
    assert load_resource_bytes("images.placeholder.bmp")[:2] == b"BM"


def test_backslash_and_leading_slash_are_tolerated():
    assert load_resource_bytes("/images\\placeholder.bmp")[:2] == b"BM"


@pytest.mark.parametrize(
    "name",
    ["cursors/missing.cur", "missing.cur", "cursors", "", "../config.py"],
)
def test_missing_resources_raise(name):
    with pytest.raises(ResourceNotFoundError):
        load_resource_bytes(name)


def test_resource_not_found_is_a_file_not_found_error():
    with pytest.raises(FileNotFoundError):
        load_resource_bytes("images/nothing.png")


def test_resource_exists():
    assert resource_exists("images/placeholder.bmp")
    assert not resource_exists("images/nothing.png")
    assert not resource_exists("..")


def test_custom_resource_package(tmp_path: Path, monkeypatch):
    package_dir = tmp_path / "fake_assets"
    (package_dir / "data").mkdir(parents=True)
    (package_dir / "__init__.py").write_text("", encoding="utf-8")
    (package_dir / "data" / "blob.bin").write_bytes(b"\x01\x02\x03")
    monkeypatch.syspath_prepend(str(tmp_path))

    assert load_resource_bytes("data/blob.bin", package="fake_assets") == b"\x01\x02\x03"
    assert load_resource_bytes("data.blob.bin", package="fake_assets") == b"\x01\x02\x03"


def test_unknown_package_raises():
    with pytest.raises(ResourceNotFoundError):
        load_resource_bytes("anything.bin", package="picturebox_no_such_package")
