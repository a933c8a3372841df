"""Where: src/tracklist/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
"""

from __future__ import annotations

from pathlib import Path

from tracklist.config.config import TRACK_GAP_SECONDS_DEFAULT, config as app_config

# Playlist storage ------------------------------------------------------------

# Suffix of every persisted playlist file inside the storage folder.
PLAYLIST_FILE_SUFFIX: str = ".txt"

# Explicit storage folder from config; None falls back to TRACKLIST_PLAYLIST_DIR,
# then ./playlists under the working directory at the time a store is built.
PLAYLIST_DIR_OVERRIDE: Path | None = app_config.playlist_dir


# Playback pacing -------------------------------------------------------------

_gap = getattr(app_config, "track_gap_seconds", TRACK_GAP_SECONDS_DEFAULT)
TRACK_GAP_SECONDS: float = (
    float(_gap)
    if isinstance(_gap, (int, float)) and not isinstance(_gap, bool) and _gap >= 0
    else TRACK_GAP_SECONDS_DEFAULT
)

SIMULATE_PLAYBACK: bool = bool(getattr(app_config, "simulate_playback", True))


__all__ = [
    "PLAYLIST_DIR_OVERRIDE",
    "PLAYLIST_FILE_SUFFIX",
    "SIMULATE_PLAYBACK",
    "TRACK_GAP_SECONDS",
]
