"""Ports for the playlists feature."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from ..domain.codec import LoadedPlaylist
from ..domain.playlist import Playlist


class PlaylistStore(Protocol):
    """Persist playlists by name."""

    def save(self, playlist: Playlist, filename_hint: str = "") -> Path:
        """Write ``playlist`` under ``filename_hint`` or its own name; never overwrite."""

        ...

    def list_saved(self) -> list[str]:
        """Return the names of every saved playlist."""

        ...

    def load(self, name: str) -> LoadedPlaylist:
        """Read the playlist saved under ``name``."""

        ...

    def delete(self, name: str) -> None:
        """Remove the playlist saved under ``name``."""

        ...


__all__ = ["PlaylistStore"]
