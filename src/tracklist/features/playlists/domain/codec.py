"""Summary: Encode and decode the pipe-delimited persisted playlist format.
Why: Keep the text format independent from where playlist files live.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import timedelta
from logging import getLogger
from typing import Final

from tracklist.features.tracks import (
    Track,
    TrackFormat,
    new_mp3_track,
    new_track,
    new_wav_track,
)

from .errors import BlankPlaylistNameError, EmptyPlaylistFileError, TrackLineError
from .playlist import Playlist

FIELD_SEPARATOR: Final[str] = "|"
FIELD_COUNT: Final[int] = 5
_INTEGER_FIELD: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")

logger = getLogger(__name__)


@dataclass(slots=True, frozen=True)
class LoadedPlaylist:
    """Playlist restored from text plus the number of track lines dropped."""

    playlist: Playlist
    skipped_lines: int = 0


def encode_track(track: Track) -> str:
    """Render ``track`` as ``title|artist|durationMillis|format|extra``."""

    duration_ms = track.duration // timedelta(milliseconds=1)
    return FIELD_SEPARATOR.join(
        [track.title, track.artist, str(duration_ms), track.format, str(track.extra)]
    )


def encode_playlist(playlist: Playlist) -> str:
    """Render the full file content: the name line, then one line per track."""

    lines = [playlist.name, *(encode_track(track) for track in playlist.tracks)]
    return "\n".join(lines) + "\n"


def _parse_int(raw: str, field_name: str) -> int:
    value = raw.strip()
    if _INTEGER_FIELD.fullmatch(value) is None:
        raise TrackLineError(f"{field_name} is not numeric: {raw!r}")
    return int(value)


def parse_track_line(line: str) -> Track:
    """Rebuild a track from one persisted line.

    The format tag selects the variant; unknown tags produce a bare ``Track``
    and their extra value is ignored.

    Raises:
        TrackLineError: If the field count is wrong, duration or extra is not
            an ASCII integer, or the duration is negative or out of range.
    """
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) != FIELD_COUNT:
        raise TrackLineError(f"expected {FIELD_COUNT} fields, found {len(parts)}")

    title, artist, raw_duration, track_format, raw_extra = parts
    duration_ms = _parse_int(raw_duration, "duration")
    extra = _parse_int(raw_extra, "extra")
    if duration_ms < 0:
        raise TrackLineError(f"duration is negative: {duration_ms}")

    try:
        duration = timedelta(milliseconds=duration_ms)
    except OverflowError as exc:
        raise TrackLineError(f"duration is out of range: {duration_ms}") from exc
    match track_format:
        case TrackFormat.MP3.value:
            return new_mp3_track(title, artist, duration, extra)
        case TrackFormat.WAV.value:
            return new_wav_track(title, artist, duration, extra)
        case _:
            return new_track(title, artist, duration, track_format)


def decode_playlist(lines: Iterable[str], *, source: str = "<memory>") -> LoadedPlaylist:
    """Parse persisted playlist lines, skipping malformed track lines.

    Args:
        lines: File lines, with or without trailing newlines.
        source: Label used in error and log messages.

    Returns:
        LoadedPlaylist: The playlist and the count of skipped track lines.

    Raises:
        EmptyPlaylistFileError: If there is no first line.
        BlankPlaylistNameError: If the first line is blank.
    """
    iterator = iter(lines)
    first_line = next(iterator, None)
    if first_line is None:
        raise EmptyPlaylistFileError(source)

    name = first_line.strip()
    if not name:
        raise BlankPlaylistNameError(source)

    playlist = Playlist(name)
    skipped = 0
    for line_number, raw_line in enumerate(iterator, start=2):
        line = raw_line.strip()
        if not line:
            continue
        try:
            track = parse_track_line(line)
        except TrackLineError as exc:
            skipped += 1
            logger.warning(
                "Skipping line %d of %s: %s",
                line_number,
                source,
                exc,
                extra={
                    "playlist_event": "playlist.line.skipped",
                    "playlist": name,
                    "line_number": line_number,
                    "reason": str(exc),
                    "path": source,
                },
            )
            continue
        playlist.add_track(track)

    return LoadedPlaylist(playlist=playlist, skipped_lines=skipped)


__all__ = [
    "FIELD_COUNT",
    "FIELD_SEPARATOR",
    "LoadedPlaylist",
    "decode_playlist",
    "encode_playlist",
    "encode_track",
    "parse_track_line",
]
