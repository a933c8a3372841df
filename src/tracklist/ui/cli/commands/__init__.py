"""Command execution package for CLI."""

from tracklist.ui.cli.commands.executor import CommandExecutor
from tracklist.ui.cli.commands.demo import DemoCommand
from tracklist.ui.cli.commands.listing import ListCommand
from tracklist.ui.cli.commands.play import PlayCommand
from tracklist.ui.cli.commands.show import ShowCommand

__all__ = [
    "CommandExecutor",
    "DemoCommand",
    "ListCommand",
    "PlayCommand",
    "ShowCommand",
]
