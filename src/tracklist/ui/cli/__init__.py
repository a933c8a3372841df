"""Command line interface package."""

from tracklist.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
