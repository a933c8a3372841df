# Path: `src/tracklist/features/tracks/__init__.py`
# Summary: Export track variants, the format tag, and their factories.
# Why: Provide a stable import surface for playlists, adapters, and tests.

from .domain.models import (
    MP3Track,
    Track,
    TrackFormat,
    WAVTrack,
    format_duration,
    new_mp3_track,
    new_track,
    new_wav_track,
)

__all__ = [
    "MP3Track",
    "Track",
    "TrackFormat",
    "WAVTrack",
    "format_duration",
    "new_mp3_track",
    "new_track",
    "new_wav_track",
]
