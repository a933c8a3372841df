"""Application service wiring playlist storage and playback together."""

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import timedelta
from logging import Logger, getLogger
from pathlib import Path
from typing import final

from rich.console import Console

from tracklist.config.settings import SIMULATE_PLAYBACK, TRACK_GAP_SECONDS
from tracklist.features.playlists import LoadedPlaylist, Playlist, PlaylistError, PlaylistStore
from tracklist.features.playlists.adapters.filesystem.local import LocalPlaylistStore


@final
class PlaylistLibraryService:
    """Application façade over a playlist store and simulated playback."""

    _store: PlaylistStore
    _console: Console
    _sleep: Callable[[float], None]
    _gap: timedelta
    _simulate: bool
    _logger: Logger

    def __init__(
        self,
        *,
        store: PlaylistStore | None = None,
        console: Console | None = None,
        sleep: Callable[[float], None] | None = None,
        gap: timedelta | None = None,
        simulate: bool | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._store = store if store is not None else LocalPlaylistStore()
        self._console = console or Console()
        self._sleep = sleep or time.sleep
        self._gap = gap if gap is not None else timedelta(seconds=TRACK_GAP_SECONDS)
        self._simulate = SIMULATE_PLAYBACK if simulate is None else simulate
        self._logger = logger or getLogger(__name__)

    @property
    def store(self) -> PlaylistStore:
        return self._store

    def save(self, playlist: Playlist, filename_hint: str = "", *, replace: bool = False) -> Path:
        """Persist ``playlist``; ``replace`` deletes an existing file with the same name first."""

        if replace and (filename_hint or playlist.name) in self._store.list_saved():
            self._store.delete(filename_hint or playlist.name)
        return self._store.save(playlist, filename_hint)

    def list_saved(self) -> list[str]:
        return self._store.list_saved()

    def load(self, name: str) -> LoadedPlaylist:
        return self._store.load(name)

    def play(self, playlist: Playlist) -> None:
        """Play ``playlist`` with the configured pacing."""

        playlist.play_all(
            console=self._console,
            sleep=self._sleep,
            gap=self._gap,
            simulate=self._simulate,
        )

    def play_saved(self, name: str) -> bool:
        """Load and play a saved playlist, logging instead of raising on failure."""

        try:
            loaded = self._store.load(name)
        except PlaylistError as exc:
            self._logger.error("Error playing playlist '%s': %s", name, exc)
            return False
        self.play(loaded.playlist)
        return True


__all__ = ["PlaylistLibraryService"]
