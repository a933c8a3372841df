"""Tests for the storage directory helper."""

from pathlib import Path

import pytest

from tracklist.platform.filesystem import ensure_directory


def test_creates_missing_directory(tmp_path: Path) -> None:
    target = tmp_path / "playlists"

    result = ensure_directory(target)

    assert result == target
    assert target.is_dir()


def test_existing_directory_is_left_alone(tmp_path: Path) -> None:
    target = tmp_path / "playlists"
    target.mkdir()
    marker = target / "keep.txt"
    _ = marker.write_text("x")

    assert ensure_directory(target) == target
    assert marker.exists()


def test_is_idempotent(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "playlists"

    _ = ensure_directory(target)
    _ = ensure_directory(target)

    assert target.is_dir()


def test_file_in_the_way_raises(tmp_path: Path) -> None:
    """A regular file at the folder path makes creation fail loudly."""

    target = tmp_path / "playlists"
    _ = target.write_text("not a folder")

    with pytest.raises(OSError):
        _ = ensure_directory(target)
