"""Command line interface for tracklist."""

import sys
from typing import final

from tracklist.features.playlists import PlaylistError
from tracklist.platform.logging import logger
from tracklist.ui.cli.args import ArgumentParser
from tracklist.ui.cli.args.options import CLIArgs, DemoArgs, ListArgs, PlayArgs, ShowArgs
from tracklist.ui.cli.commands import (
    CommandExecutor,
    DemoCommand,
    ListCommand,
    PlayCommand,
    ShowCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            command = CommandProcessor._build_command(args)
            if not command.execute():
                sys.exit(1)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except PlaylistError as e:
            logger.error("%s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

    @staticmethod
    def _build_command(args: CLIArgs) -> CommandExecutor:
        if isinstance(args, DemoArgs):
            return DemoCommand(args)
        if isinstance(args, ListArgs):
            return ListCommand(args)
        if isinstance(args, ShowArgs):
            return ShowCommand(args)
        assert isinstance(args, PlayArgs)
        return PlayCommand(args)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures call ``sys.exit(...)``
        from the command processor, so this return is only reached on success.
    """
    CommandProcessor.process_command()
    return 0
