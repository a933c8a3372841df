"""src/tracklist/ui/cli/commands/demo.py
What: Run the built-in demo over sample MP3 and WAV playlists.
Why: Exercise building, shuffling, saving, listing, loading, and playback end to end.
"""

from __future__ import annotations

import random
from datetime import timedelta
from typing import Final, override

from tracklist.features.playlists import Playlist, PlaylistFileCreateError
from tracklist.features.tracks import Track, new_mp3_track, new_wav_track
from tracklist.platform.logging import logger
from tracklist.ui.cli.args.options import DemoArgs
from tracklist.ui.cli.commands.executor import CommandExecutor

# Saved by the demo itself, so a second run finds it on disk.
RESUME_PLAYLIST_NAME: Final[str] = "Mixed Favorites"


def build_sample_tracks() -> list[Track]:
    """Return the fixed sample catalogue used by the demo."""

    return [
        new_mp3_track("Bohemian Rhapsody", "Queen", timedelta(seconds=3), 320),
        new_mp3_track("Sweet Child O' Mine", "Guns N' Roses", timedelta(seconds=1), 256),
        new_wav_track("Imagine", "John Lennon", timedelta(seconds=1), 44100),
        new_wav_track("Billie Jean", "Michael Jackson", timedelta(seconds=2), 48000),
        new_mp3_track("Stairway to Heaven", "Led Zeppelin", timedelta(seconds=4), 192),
        new_wav_track("Smells Like Teen Spirit", "Nirvana", timedelta(seconds=1), 44100),
    ]


def build_sample_playlists(rng: random.Random) -> list[Playlist]:
    """Group the sample tracks into three playlists, shuffling the mixed one."""

    bohemian, sweet_child, imagine, billie_jean, stairway, teen_spirit = build_sample_tracks()

    classic_rock = Playlist("Classic Rock Hits")
    for track in (bohemian, sweet_child, stairway):
        classic_rock.add_track(track)

    high_fidelity = Playlist("High-Quality WAV Collection")
    for track in (imagine, billie_jean, teen_spirit):
        high_fidelity.add_track(track)

    mixed = Playlist(RESUME_PLAYLIST_NAME)
    for track in (bohemian, imagine, sweet_child):
        mixed.add_track(track)
    mixed.shuffle_tracks(rng)

    return [classic_rock, high_fidelity, mixed]


class DemoCommand(CommandExecutor[DemoArgs]):
    """Command running the fixed demo scenario."""

    @override
    def execute(self) -> bool:
        rng = random.Random(self.args.seed)

        if RESUME_PLAYLIST_NAME in self.service.list_saved():
            logger.info("Resuming playlist saved by a previous run: %s", RESUME_PLAYLIST_NAME)
            _ = self.service.play_saved(RESUME_PLAYLIST_NAME)
        else:
            logger.info("No saved playlist named '%s' yet", RESUME_PLAYLIST_NAME)

        playlists = build_sample_playlists(rng)
        for playlist in playlists:
            try:
                _ = self.service.save(playlist, replace=self.args.replace)
            except PlaylistFileCreateError as exc:
                logger.warning("Keeping existing playlist '%s': %s", playlist.name, exc)

        names = self.service.list_saved()
        if not names:
            logger.error("No playlists found on disk")
            return False
        self.display.show_saved(names, quiet=self.args.quiet)

        selected = rng.choice(names)
        logger.info("Randomly selected playlist: %s", selected)
        return self.service.play_saved(selected)


__all__ = ["DemoCommand", "RESUME_PLAYLIST_NAME", "build_sample_playlists", "build_sample_tracks"]
