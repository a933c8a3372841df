"""src/tracklist/ui/cli/commands/play.py
What: Play one saved playlist, optionally shuffled.
Why: Replay playlists saved by earlier runs.
"""

import random
from typing import override

from tracklist.application.services.playlist_service import PlaylistLibraryService
from tracklist.ui.cli.args.options import PlayArgs
from tracklist.ui.cli.commands.executor import CommandExecutor


class PlayCommand(CommandExecutor[PlayArgs]):
    """Command for playing a saved playlist."""

    @override
    def build_service(self) -> PlaylistLibraryService:
        if self.args.no_wait:
            return PlaylistLibraryService(simulate=False)
        return PlaylistLibraryService()

    @override
    def execute(self) -> bool:
        playlist = self.service.load(self.args.name).playlist
        if self.args.shuffle:
            playlist.shuffle_tracks(random.Random(self.args.seed))
        self.service.play(playlist)
        return True
