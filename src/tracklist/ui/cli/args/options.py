"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final


@final
@dataclass(slots=True)
class DemoArgs:
    """Arguments for the ``demo`` subcommand, also used when no command is given."""

    command: Literal["demo"]
    verbose: bool
    quiet: bool
    seed: int | None
    replace: bool


@final
@dataclass(slots=True)
class ListArgs:
    """Arguments for the ``list`` subcommand."""

    command: Literal["list"]
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ShowArgs:
    """Arguments for the ``show`` subcommand."""

    command: Literal["show"]
    name: str
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class PlayArgs:
    """Arguments for the ``play`` subcommand."""

    command: Literal["play"]
    name: str
    verbose: bool
    quiet: bool
    shuffle: bool
    no_wait: bool
    seed: int | None


CLIArgs = DemoArgs | ListArgs | ShowArgs | PlayArgs

__all__ = ["CLIArgs", "DemoArgs", "ListArgs", "PlayArgs", "ShowArgs"]
