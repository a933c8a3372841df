"""Tests for ``PlaylistRichHandler`` event rendering."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any

from rich.console import Console
from rich.text import Text

from tracklist.platform.logging import PlaylistRichHandler


def _make_handler() -> PlaylistRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return PlaylistRichHandler(console=console)


def _build_record(**extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with playlist extras for testing."""

    record = logging.LogRecord(
        name="tracklist",
        level=logging.INFO,
        pathname="test",
        lineno=0,
        msg="",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_saved_event_reports_track_count_and_path() -> None:
    handler = _make_handler()
    record = _build_record(
        playlist_event="playlist.saved",
        playlist="Road Trip",
        track_count=4,
        path="playlists/Road Trip.txt",
    )

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    assert "Saved 'Road Trip' [tracks=4]" in rendered.plain
    assert "playlists/Road Trip.txt" in rendered.plain


def test_loaded_event_mentions_skipped_lines() -> None:
    handler = _make_handler()
    record = _build_record(
        playlist_event="playlist.loaded",
        playlist="Mix",
        track_count=2,
        skipped_lines=1,
    )

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    assert "tracks=2, skipped=1" in rendered.plain


def test_long_paths_are_truncated() -> None:
    handler = _make_handler()
    record = _build_record(
        playlist_event="playlist.line.skipped",
        line_number=3,
        reason="duration is not numeric: 'abc'",
        path="/home/user/music/library/playlists/Mix.txt",
    )

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    plain = rendered.plain
    assert "Skipped track line 3" in plain
    assert "…/library/playlists/Mix.txt" in plain


def test_track_events_show_sequence() -> None:
    handler = _make_handler()
    record = _build_record(
        playlist_event="playlist.track.start",
        sequence=2,
        total_tracks=5,
        title="Imagine",
        artist="John Lennon",
    )

    rendered = handler.render_message(record, "")

    assert isinstance(rendered, Text)
    assert "[2/5] Now playing John Lennon - Imagine" in rendered.plain


def test_plain_records_fall_back_to_default_rendering() -> None:
    handler = _make_handler()
    record = _build_record()

    rendered = handler.render_message(record, "plain message")

    assert isinstance(rendered, Text)
    assert rendered.plain == "plain message"
