"""Error types raised by playlist persistence."""

from __future__ import annotations

from pathlib import Path


class PlaylistError(Exception):
    """Base class for playlist storage failures that abort an operation."""


class StorageDirectoryError(PlaylistError):
    """The storage folder could not be created or accessed."""

    def __init__(self, directory: Path, reason: str) -> None:
        super().__init__(f"failed to prepare playlist folder {directory}: {reason}")
        self.directory = directory


class PlaylistFileCreateError(PlaylistError):
    """The playlist file could not be created; an existing file counts as failure."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"could not create playlist file {path}: {reason}")
        self.path = path


class PlaylistFileOpenError(PlaylistError):
    """The playlist file is missing or cannot be opened."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"could not open playlist file {path}: {reason}")
        self.path = path


class PlaylistReadError(PlaylistError):
    """Reading an opened playlist file failed midway."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"failed to read playlist file {path}: {reason}")
        self.path = path


class PlaylistWriteError(PlaylistError):
    """Writing a newly created playlist file failed midway."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"failed to write playlist file {path}: {reason}")
        self.path = path


class EmptyPlaylistFileError(PlaylistError):
    """The playlist file has no content at all."""

    def __init__(self, source: str) -> None:
        super().__init__(f"invalid playlist {source}: empty file")
        self.source = source


class BlankPlaylistNameError(PlaylistError):
    """The first line of the playlist file holds no name."""

    def __init__(self, source: str) -> None:
        super().__init__(f"invalid playlist {source}: blank playlist name")
        self.source = source


class TrackLineError(ValueError):
    """A single track line is malformed; loaders skip it and carry on."""


__all__ = [
    "BlankPlaylistNameError",
    "EmptyPlaylistFileError",
    "PlaylistError",
    "PlaylistFileCreateError",
    "PlaylistFileOpenError",
    "PlaylistReadError",
    "PlaylistWriteError",
    "StorageDirectoryError",
    "TrackLineError",
]
