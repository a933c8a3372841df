"""src/tracklist/ui/cli/commands/listing.py
What: List playlists saved in the storage folder.
Why: Let users discover names accepted by ``show`` and ``play``.
"""

from typing import override

from tracklist.ui.cli.args.options import ListArgs
from tracklist.ui.cli.commands.executor import CommandExecutor


class ListCommand(CommandExecutor[ListArgs]):
    """Command for listing saved playlists."""

    @override
    def execute(self) -> bool:
        names = self.service.list_saved()
        self.display.show_saved(names, quiet=self.args.quiet)
        return True
