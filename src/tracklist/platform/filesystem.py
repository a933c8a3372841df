"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

from pathlib import Path


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it.

    A missing folder is created with default permissions. When a non-directory
    occupies the path, creation is still attempted so the ``OSError`` raised by
    the filesystem reaches the caller.
    """

    if directory.is_dir():
        return directory

    directory.mkdir(parents=True)
    return directory


__all__ = ["ensure_directory"]
