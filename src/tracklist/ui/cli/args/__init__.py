"""Command line argument handling package."""

from tracklist.ui.cli.args.parser import ArgumentParser
from tracklist.ui.cli.args.options import CLIArgs, DemoArgs, ListArgs, PlayArgs, ShowArgs

__all__ = ["ArgumentParser", "CLIArgs", "DemoArgs", "ListArgs", "PlayArgs", "ShowArgs"]
