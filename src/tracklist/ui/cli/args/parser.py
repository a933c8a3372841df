"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import final

from tracklist.config.config import Config
from tracklist.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from tracklist.ui.cli.args.options import CLIArgs, DemoArgs, ListArgs, PlayArgs, ShowArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            description=(
                "tracklist - manage MP3/WAV playlists saved as plain text files. "
                "Runs the demo when no command is given."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command")

        demo_parser = subparsers.add_parser(
            "demo",
            help="Build sample playlists, save them, and play one at random",
        )
        ArgumentParser._add_output_flags(demo_parser)
        ArgumentParser._add_seed_flag(demo_parser)
        _ = demo_parser.add_argument(
            "--replace",
            action="store_true",
            help="Overwrite sample playlists saved by a previous run",
        )

        list_parser = subparsers.add_parser(
            "list",
            help="List saved playlists",
        )
        ArgumentParser._add_output_flags(list_parser)

        show_parser = subparsers.add_parser(
            "show",
            help="Show the tracks of a saved playlist",
        )
        _ = show_parser.add_argument("name", type=str, help="Saved playlist name", metavar="NAME")
        ArgumentParser._add_output_flags(show_parser)

        play_parser = subparsers.add_parser(
            "play",
            help="Play a saved playlist",
        )
        _ = play_parser.add_argument("name", type=str, help="Saved playlist name", metavar="NAME")
        ArgumentParser._add_output_flags(play_parser)
        ArgumentParser._add_seed_flag(play_parser)
        _ = play_parser.add_argument(
            "--shuffle",
            action="store_true",
            help="Shuffle tracks before playing",
        )
        _ = play_parser.add_argument(
            "--no-wait",
            action="store_true",
            help="Do not block for each track's duration",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str | None = parsed_args.command

        if command is None or command == "demo":
            return DemoArgs(
                command="demo",
                verbose=is_verbose,
                quiet=is_quiet,
                seed=getattr(parsed_args, "seed", None),
                replace=bool(getattr(parsed_args, "replace", False)),
            )

        if command == "list":
            return ListArgs(command="list", verbose=is_verbose, quiet=is_quiet)

        if command == "show":
            return ShowArgs(
                command="show",
                name=parsed_args.name,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "play":
            return PlayArgs(
                command="play",
                name=parsed_args.name,
                verbose=is_verbose,
                quiet=is_quiet,
                shuffle=parsed_args.shuffle,
                no_wait=parsed_args.no_wait,
                seed=parsed_args.seed,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _add_output_flags(parser: argparse.ArgumentParser) -> None:
        output_group = parser.add_mutually_exclusive_group()
        _ = output_group.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed playback and storage events",
        )
        _ = output_group.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all log output except errors",
        )

    @staticmethod
    def _add_seed_flag(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--seed",
            type=int,
            help="Seed for shuffling and random selection",
            metavar="SEED",
        )
