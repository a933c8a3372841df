"""src/tracklist/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse the library service and display helpers across commands.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from tracklist.application.services.playlist_service import PlaylistLibraryService
from tracklist.ui.cli.args.options import CLIArgs
from tracklist.ui.cli.display.playlist_view import PlaylistDisplay

ArgsT = TypeVar("ArgsT", bound=CLIArgs)


class CommandExecutor(ABC, Generic[ArgsT]):
    """Base class for command execution."""

    args: ArgsT
    service: PlaylistLibraryService
    display: PlaylistDisplay

    def __init__(self, args: ArgsT, service: PlaylistLibraryService | None = None) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            service: Library service; built with default storage when omitted.
        """
        self.args = args
        self.service = service or self.build_service()
        self.display = PlaylistDisplay()

    def build_service(self) -> PlaylistLibraryService:
        """Create the library service used when none is injected."""

        return PlaylistLibraryService()

    @abstractmethod
    def execute(self) -> bool:
        """Execute the command.

        Returns:
            bool: True when the command succeeded.
        """
        pass
