"""src/tracklist/ui/cli/commands/show.py
What: Print the tracks of one saved playlist.
Why: Inspect a playlist file without playing it.
"""

from typing import override

from tracklist.ui.cli.args.options import ShowArgs
from tracklist.ui.cli.commands.executor import CommandExecutor


class ShowCommand(CommandExecutor[ShowArgs]):
    """Command for displaying a saved playlist."""

    @override
    def execute(self) -> bool:
        loaded = self.service.load(self.args.name)
        self.display.show_playlist(loaded)
        return True
