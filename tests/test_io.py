"""Tests for file IO helpers."""

from __future__ import annotations

import stat
from pathlib import Path

import pytest

from codecache.exceptions import FileAccessError
from codecache.io import read_cache_file, write_cache_file, write_json_atomic


def test_read_cache_file_missing_raises_file_access_error(tmp_path: Path) -> None:
    path = tmp_path / "missing.jsc"

    with pytest.raises(FileAccessError, match="Cannot read") as excinfo:
        read_cache_file(path)

    assert excinfo.value.path == path


def test_write_cache_file_replaces_contents(tmp_path: Path) -> None:
    path = tmp_path / "code.jsc"
    path.write_bytes(b"old contents that are longer")

    write_cache_file(path, b"new")

    assert read_cache_file(path) == b"new"
    assert [item.name for item in tmp_path.iterdir()] == ["code.jsc"]


def test_write_cache_file_into_missing_directory_raises(tmp_path: Path) -> None:
    path = tmp_path / "absent" / "code.jsc"

    with pytest.raises(FileAccessError, match="Cannot write"):
        write_cache_file(path, b"data")


def test_write_json_atomic_cleans_temp_file_on_error(tmp_path: Path) -> None:
    out_path = tmp_path / "report.json"
    temp_prefix = ".tmp-"
    temp_suffix = ".json"

    with pytest.raises(TypeError):
        write_json_atomic(
            path=out_path,
            payload={"bad": object()},
            temp_prefix=temp_prefix,
            temp_suffix=temp_suffix,
        )

    leftovers = [
        item for item in tmp_path.iterdir() if item.name.startswith(temp_prefix) and item.name.endswith(temp_suffix)
    ]
    assert not leftovers
    assert not out_path.exists()


def test_write_cache_file_preserves_mode(tmp_path: Path) -> None:
    path = tmp_path / "code.jsc"
    path.write_bytes(b"old")
    path.chmod(0o644)

    write_cache_file(path, b"new")

    assert stat.S_IMODE(path.stat().st_mode) == 0o644
    assert path.read_bytes() == b"new"


def test_write_cache_file_follows_symlink(tmp_path: Path) -> None:
    real = tmp_path / "real.jsc"
    real.write_bytes(b"old")
    link = tmp_path / "link.jsc"
    link.symlink_to(real)

    write_cache_file(link, b"new")

    assert link.is_symlink()
    assert real.read_bytes() == b"new"
    assert sorted(item.name for item in tmp_path.iterdir()) == ["link.jsc", "real.jsc"]
