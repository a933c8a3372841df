# Path: `src/tracklist/features/playlists/__init__.py`
# Summary: Export playlist domain, codec, error, and port symbols.
# Why: Provide a stable import surface for the application layer and tests.

from .domain.codec import (
    LoadedPlaylist,
    decode_playlist,
    encode_playlist,
    encode_track,
    parse_track_line,
)
from .domain.errors import (
    BlankPlaylistNameError,
    EmptyPlaylistFileError,
    PlaylistError,
    PlaylistFileCreateError,
    PlaylistFileOpenError,
    PlaylistReadError,
    PlaylistWriteError,
    StorageDirectoryError,
    TrackLineError,
)
from .domain.playlist import DEFAULT_TRACK_GAP, Playlist
from .usecases.ports import PlaylistStore

__all__ = [
    "DEFAULT_TRACK_GAP",
    "BlankPlaylistNameError",
    "EmptyPlaylistFileError",
    "LoadedPlaylist",
    "Playlist",
    "PlaylistError",
    "PlaylistFileCreateError",
    "PlaylistFileOpenError",
    "PlaylistReadError",
    "PlaylistStore",
    "PlaylistWriteError",
    "StorageDirectoryError",
    "TrackLineError",
    "decode_playlist",
    "encode_playlist",
    "encode_track",
    "parse_track_line",
]
