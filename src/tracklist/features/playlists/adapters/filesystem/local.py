"""Filesystem adapter storing one ``<name>.txt`` file per playlist."""

from __future__ import annotations

from logging import getLogger
from pathlib import Path

from tracklist.config.paths import default_playlist_dir
from tracklist.config.settings import PLAYLIST_DIR_OVERRIDE, PLAYLIST_FILE_SUFFIX
from tracklist.platform.filesystem import ensure_directory

from ...domain.codec import LoadedPlaylist, decode_playlist, encode_playlist
from ...domain.errors import (
    PlaylistFileCreateError,
    PlaylistFileOpenError,
    PlaylistReadError,
    PlaylistWriteError,
    StorageDirectoryError,
)
from ...domain.playlist import Playlist
from ...usecases.ports import PlaylistStore

logger = getLogger(__name__)


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc) or exc.__class__.__name__


class LocalPlaylistStore(PlaylistStore):
    """Playlist store backed by a single local folder."""

    _root: Path
    _suffix: str

    def __init__(self, root: Path | None = None, *, suffix: str = PLAYLIST_FILE_SUFFIX) -> None:
        self._root = root if root is not None else default_playlist_dir(PLAYLIST_DIR_OVERRIDE)
        self._suffix = suffix

    @property
    def root(self) -> Path:
        return self._root

    def save(self, playlist: Playlist, filename_hint: str = "") -> Path:
        directory = self._ensure_root()
        path = self._file_path(directory, filename_hint or playlist.name, PlaylistFileCreateError)

        try:
            handle = path.open("x", encoding="utf-8", newline="\n")
        except FileExistsError as exc:
            raise PlaylistFileCreateError(path, "file already exists") from exc
        except OSError as exc:
            raise PlaylistFileCreateError(path, _reason(exc)) from exc

        try:
            with handle:
                _ = handle.write(encode_playlist(playlist))
        except OSError as exc:
            path.unlink(missing_ok=True)
            raise PlaylistWriteError(path, _reason(exc)) from exc

        logger.info(
            "Playlist saved to %s",
            path,
            extra={
                "playlist_event": "playlist.saved",
                "playlist": playlist.name,
                "track_count": len(playlist),
                "path": str(path),
            },
        )
        return path

    def list_saved(self) -> list[str]:
        directory = self._ensure_root()
        try:
            entries = list(directory.iterdir())
        except OSError as exc:
            raise StorageDirectoryError(directory, _reason(exc)) from exc

        return sorted(
            entry.stem
            for entry in entries
            if entry.suffix == self._suffix and entry.is_file()
        )

    def load(self, name: str) -> LoadedPlaylist:
        directory = self._ensure_root()
        path = self._file_path(directory, name, PlaylistFileOpenError)

        try:
            handle = path.open("r", encoding="utf-8", newline="\n")
        except OSError as exc:
            raise PlaylistFileOpenError(path, _reason(exc)) from exc

        with handle:
            try:
                lines = handle.readlines()
            except OSError as exc:
                raise PlaylistReadError(path, _reason(exc)) from exc
            except UnicodeDecodeError as exc:
                raise PlaylistReadError(path, str(exc)) from exc

        loaded = decode_playlist(lines, source=str(path))
        logger.info(
            "Loaded playlist '%s' from %s",
            loaded.playlist.name,
            path,
            extra={
                "playlist_event": "playlist.loaded",
                "playlist": loaded.playlist.name,
                "track_count": len(loaded.playlist),
                "skipped_lines": loaded.skipped_lines,
                "path": str(path),
            },
        )
        return loaded

    def delete(self, name: str) -> None:
        directory = self._ensure_root()
        path = self._file_path(directory, name, PlaylistFileOpenError)
        try:
            path.unlink()
        except OSError as exc:
            raise PlaylistFileOpenError(path, _reason(exc)) from exc
        logger.debug("Deleted playlist file %s", path)

    def _ensure_root(self) -> Path:
        existed = self._root.is_dir()
        try:
            directory = ensure_directory(self._root)
        except OSError as exc:
            raise StorageDirectoryError(self._root, _reason(exc)) from exc
        if not existed:
            logger.info("Created playlist directory: %s", directory)
        return directory

    def _file_path(
        self,
        directory: Path,
        stem: str,
        failure: type[PlaylistFileCreateError] | type[PlaylistFileOpenError],
    ) -> Path:
        """Map a playlist name to its file, refusing names that leave the folder."""

        path = directory / f"{stem}{self._suffix}"
        if not stem or stem in {".", ".."} or Path(stem).name != stem:
            raise failure(path, f"invalid playlist name {stem!r}")
        return path


__all__ = ["LocalPlaylistStore"]
