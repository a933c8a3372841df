"""Ordered, named collection of tracks with simulated playback."""

from __future__ import annotations

import random
import time
from collections.abc import Callable, Iterator
from datetime import timedelta
from logging import getLogger
from typing import Final

from rich.console import Console
from rich.markup import escape

from tracklist.features.tracks import Track, format_duration

DEFAULT_TRACK_GAP: Final[timedelta] = timedelta(milliseconds=500)

logger = getLogger(__name__)


class Playlist:
    """Playlist whose track order is its playback order."""

    _name: str
    _tracks: list[Track]

    def __init__(self, name: str, tracks: list[Track] | None = None) -> None:
        self._name = name
        self._tracks = list(tracks) if tracks else []

    @property
    def name(self) -> str:
        return self._name

    @property
    def tracks(self) -> tuple[Track, ...]:
        """Snapshot of the tracks in playback order."""
        return tuple(self._tracks)

    def __len__(self) -> int:
        return len(self._tracks)

    def __iter__(self) -> Iterator[Track]:
        return iter(tuple(self._tracks))

    def __repr__(self) -> str:
        return f"Playlist(name={self._name!r}, tracks={len(self._tracks)})"

    def add_track(self, track: Track) -> None:
        """Append ``track``; duplicates are allowed."""

        self._tracks.append(track)

    def remove_track(self, index: int) -> None:
        """Remove the track at ``index``.

        Indexes outside ``[0, len)`` leave the playlist untouched and are not
        reported. Negative indexes do not wrap around.
        """

        if 0 <= index < len(self._tracks):
            del self._tracks[index]

    def shuffle_tracks(self, rng: random.Random | None = None) -> None:
        """Shuffle tracks in place with a uniform permutation."""

        if not self._tracks:
            self._tracks = []
            return
        (rng or random.Random()).shuffle(self._tracks)

    def total_duration(self) -> timedelta:
        """Sum of every track duration; zero for an empty playlist."""

        if not self._tracks:
            logger.info("No tracks in playlist '%s'", self._name)
            return timedelta(0)
        return sum((track.duration for track in self._tracks), timedelta(0))

    def play_all(
        self,
        *,
        console: Console | None = None,
        sleep: Callable[[float], None] = time.sleep,
        gap: timedelta = DEFAULT_TRACK_GAP,
        simulate: bool = True,
    ) -> None:
        """Play every track in order, blocking for each track's duration.

        Args:
            console: Console receiving the playback lines.
            sleep: Blocking wait used for pacing.
            gap: Pause after each finished track.
            simulate: When False, skip waiting for the track duration.
        """
        output = console or Console()
        if not self._tracks:
            output.print(f"No tracks in playlist '{self._name}'", markup=False)
            return

        total = len(self._tracks)
        output.print(
            f"\n[bold]Playing playlist: {escape(self._name)}[/bold] "
            f"(duration: {format_duration(self.total_duration())})"
        )
        for sequence, track in enumerate(tuple(self._tracks), start=1):
            event_extra = {
                "playlist": self._name,
                "sequence": sequence,
                "total_tracks": total,
                "title": track.title,
                "artist": track.artist,
            }
            logger.debug(
                "Now playing %s by %s",
                track.title,
                track.artist,
                extra={"playlist_event": "playlist.track.start", **event_extra},
            )
            output.print(
                f"\nNow playing: {track.title} by {track.artist} "
                f"({format_duration(track.duration)} | {track.format} | {self._name})",
                markup=False,
                highlight=False,
            )
            track.play(output)
            if simulate:
                sleep(track.duration.total_seconds())
            output.print(f"Finished playing: {track.title} by {track.artist}", markup=False)
            logger.debug(
                "Finished %s by %s",
                track.title,
                track.artist,
                extra={"playlist_event": "playlist.track.finish", **event_extra},
            )
            sleep(gap.total_seconds())


__all__ = ["DEFAULT_TRACK_GAP", "Playlist"]
