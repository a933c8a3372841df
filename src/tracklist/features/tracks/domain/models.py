"""Track records shared by playlists, playback, and persistence."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Final, override

from rich.console import Console


class TrackFormat(str, Enum):
    """Known format tags; other tags are kept verbatim on base tracks."""

    MP3 = "mp3"
    WAV = "wav"

    @staticmethod
    def from_user_input(value: str) -> "TrackFormat":
        """Translate raw input into the matching format tag."""

        normalized = value.strip().lower()
        for track_format in TrackFormat:
            if track_format.value == normalized:
                return track_format
        valid: Final[str] = ", ".join(f.value for f in TrackFormat)
        msg = f"Unsupported track format '{value}'. Valid options: {valid}"
        raise ValueError(msg)


def format_duration(duration: timedelta) -> str:
    """Render a duration as compact seconds, e.g. ``3s`` or ``2.5s``."""

    return f"{duration.total_seconds():g}s"


@dataclass(frozen=True)
class Track:
    """A playable entry with a format tag and no format-specific metadata."""

    title: str
    artist: str
    duration: timedelta
    format: str

    def __post_init__(self) -> None:
        if self.duration < timedelta(0):
            raise ValueError(f"Track duration cannot be negative: {self.duration}")

    @property
    def extra(self) -> int:
        """Format-specific value persisted alongside the common fields."""
        return 0

    def describe(self) -> str:
        return f"Playing: {self.title} by {self.artist}"

    def play(self, console: Console | None = None) -> None:
        """Print the playing line for this track."""

        target = console or Console()
        target.print(self.describe(), markup=False, highlight=False)


@dataclass(frozen=True)
class MP3Track(Track):
    """MP3 track carrying its bitrate in kilobits per second."""

    format: str = field(init=False, default=TrackFormat.MP3.value)
    bitrate_kbps: int

    @property
    @override
    def extra(self) -> int:
        return self.bitrate_kbps

    @override
    def describe(self) -> str:
        return (
            f"Playing MP3: {self.title} by {self.artist} "
            f"[{format_duration(self.duration)}, {self.bitrate_kbps} kbps]"
        )


@dataclass(frozen=True)
class WAVTrack(Track):
    """WAV track carrying its sample rate in hertz."""

    format: str = field(init=False, default=TrackFormat.WAV.value)
    sample_rate_hz: int

    @property
    @override
    def extra(self) -> int:
        return self.sample_rate_hz

    @override
    def describe(self) -> str:
        return (
            f"Playing WAV: {self.title} by {self.artist} "
            f"[{format_duration(self.duration)}, {self.sample_rate_hz} Hz]"
        )


def new_track(title: str, artist: str, duration: timedelta, track_format: str) -> Track:
    """Create a bare track for formats without dedicated metadata.

    Raises:
        ValueError: If ``track_format`` names a format with its own variant;
            use ``new_mp3_track`` or ``new_wav_track`` instead.
    """
    if any(track_format == known.value for known in TrackFormat):
        msg = f"Format '{track_format}' has a dedicated track type"
        raise ValueError(msg)
    return Track(title=title, artist=artist, duration=duration, format=track_format)


def new_mp3_track(title: str, artist: str, duration: timedelta, bitrate_kbps: int) -> MP3Track:
    """Create an MP3 track."""

    return MP3Track(title=title, artist=artist, duration=duration, bitrate_kbps=bitrate_kbps)


def new_wav_track(title: str, artist: str, duration: timedelta, sample_rate_hz: int) -> WAVTrack:
    """Create a WAV track."""

    return WAVTrack(title=title, artist=artist, duration=duration, sample_rate_hz=sample_rate_hz)


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
