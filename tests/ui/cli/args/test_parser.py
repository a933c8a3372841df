"""Tests for command line argument parser."""

import logging
from argparse import Namespace

import pytest
from pytest_mock import MockerFixture

from tracklist.platform.logging import DEFAULT_LOG_FILE
from tracklist.ui.cli.args import ArgumentParser, DemoArgs, ListArgs, PlayArgs, ShowArgs


@pytest.fixture
def mock_setup_logger(mocker: MockerFixture):
    mock_config = mocker.patch("tracklist.ui.cli.args.parser.Config")
    mock_config.load.return_value.log_file = None
    return mocker.patch("tracklist.ui.cli.args.parser.setup_logger")


def test_create_parser() -> None:
    """Argument parser should expose expected subcommands and options."""

    parser = ArgumentParser.create_parser()

    show_args: Namespace = parser.parse_args(["show", "Road Trip"])
    assert show_args.command == "show"
    assert show_args.name == "Road Trip"

    play_args: Namespace = parser.parse_args(["play", "Mix", "--shuffle", "--no-wait", "--seed", "3"])
    assert play_args.shuffle and play_args.no_wait
    assert play_args.seed == 3

    assert parser.parse_args([]).command is None


def test_no_arguments_runs_demo(mock_setup_logger) -> None:
    args = ArgumentParser.process_args([])

    assert isinstance(args, DemoArgs)
    assert args.seed is None
    assert not args.replace
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.INFO
    assert mock_setup_logger.call_args.kwargs["log_file"] == DEFAULT_LOG_FILE


def test_demo_flags(mock_setup_logger) -> None:
    args = ArgumentParser.process_args(["demo", "--seed", "9", "--replace", "--verbose"])

    assert isinstance(args, DemoArgs)
    assert args.seed == 9 and args.replace and args.verbose
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.DEBUG


def test_list_quiet(mock_setup_logger) -> None:
    args = ArgumentParser.process_args(["list", "--quiet"])

    assert isinstance(args, ListArgs)
    assert args.quiet
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.ERROR


def test_show_and_play(mock_setup_logger) -> None:
    show = ArgumentParser.process_args(["show", "Mix"])
    play = ArgumentParser.process_args(["play", "Mix", "--shuffle"])

    assert isinstance(show, ShowArgs) and show.name == "Mix"
    assert isinstance(play, PlayArgs)
    assert play.name == "Mix" and play.shuffle and not play.no_wait


def test_configured_log_file_is_used(mocker: MockerFixture, tmp_path) -> None:
    mock_config = mocker.patch("tracklist.ui.cli.args.parser.Config")
    mock_setup_logger = mocker.patch("tracklist.ui.cli.args.parser.setup_logger")
    custom = tmp_path / "custom.log"
    mock_config.load.return_value.log_file = custom

    _ = ArgumentParser.process_args(["list"])

    assert mock_setup_logger.call_args.kwargs["log_file"] == custom


def test_verbose_and_quiet_are_exclusive() -> None:
    parser = ArgumentParser.create_parser()

    with pytest.raises(SystemExit):
        _ = parser.parse_args(["list", "--verbose", "--quiet"])
