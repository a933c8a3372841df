"""Tests for track variants and their factories."""

from __future__ import annotations

import dataclasses
from datetime import timedelta
from io import StringIO

import pytest
from rich.console import Console

from tracklist.features.tracks import (
    MP3Track,
    Track,
    TrackFormat,
    WAVTrack,
    format_duration,
    new_mp3_track,
    new_track,
    new_wav_track,
)


def _console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, width=200, color_system=None), buffer


def test_mp3_factory_sets_format_and_bitrate() -> None:
    track = new_mp3_track("Song", "Band", timedelta(seconds=3), 128)

    assert isinstance(track, MP3Track)
    assert track.format == "mp3"
    assert track.format == TrackFormat.MP3
    assert track.bitrate_kbps == 128
    assert track.extra == 128


def test_wav_factory_sets_format_and_sample_rate() -> None:
    track = new_wav_track("Imagine", "John Lennon", timedelta(seconds=1), 44100)

    assert isinstance(track, WAVTrack)
    assert track.format == "wav"
    assert track.sample_rate_hz == 44100
    assert track.extra == 44100


def test_base_track_keeps_unknown_format() -> None:
    track = new_track("Loop", "Synth", timedelta(milliseconds=1500), "flac")

    assert type(track) is Track
    assert track.format == "flac"
    assert track.extra == 0


@pytest.mark.parametrize("track_format", ["mp3", "wav", TrackFormat.MP3])
def test_bare_factory_refuses_formats_with_variants(track_format: str) -> None:
    with pytest.raises(ValueError, match="dedicated track type"):
        _ = new_track("Song", "Band", timedelta(seconds=3), track_format)


def test_bare_factory_accepts_other_case_of_known_tag() -> None:
    assert new_track("Song", "Band", timedelta(seconds=3), "MP3").format == "MP3"


def test_tracks_are_immutable() -> None:
    track = new_mp3_track("Song", "Band", timedelta(seconds=3), 128)

    with pytest.raises(dataclasses.FrozenInstanceError):
        track.title = "Other"  # pyright: ignore[reportAttributeAccessIssue]


def test_negative_duration_is_rejected() -> None:
    with pytest.raises(ValueError):
        _ = new_wav_track("Bad", "Band", timedelta(seconds=-1), 48000)


def test_equal_fields_compare_equal_only_within_variant() -> None:
    mp3 = new_mp3_track("Song", "Band", timedelta(seconds=3), 128)

    assert mp3 == new_mp3_track("Song", "Band", timedelta(seconds=3), 128)
    assert mp3 != Track(title="Song", artist="Band", duration=timedelta(seconds=3), format="mp3")


@pytest.mark.parametrize(
    ("track", "expected"),
    [
        (
            new_mp3_track("Bohemian Rhapsody", "Queen", timedelta(seconds=3), 320),
            "Playing MP3: Bohemian Rhapsody by Queen [3s, 320 kbps]",
        ),
        (
            new_wav_track("Billie Jean", "Michael Jackson", timedelta(seconds=2), 48000),
            "Playing WAV: Billie Jean by Michael Jackson [2s, 48000 Hz]",
        ),
        (
            new_track("Loop", "Synth", timedelta(seconds=1), "ogg"),
            "Playing: Loop by Synth",
        ),
    ],
)
def test_play_prints_variant_specific_line(track: Track, expected: str) -> None:
    console, buffer = _console()

    track.play(console)

    assert buffer.getvalue().strip() == expected


def test_play_does_not_change_the_track() -> None:
    track = new_mp3_track("Song", "Band", timedelta(seconds=3), 128)
    snapshot = dataclasses.replace(track)
    console, _ = _console()

    track.play(console)

    assert track == snapshot


def test_format_duration_renders_fractional_seconds() -> None:
    assert format_duration(timedelta(seconds=3)) == "3s"
    assert format_duration(timedelta(milliseconds=2500)) == "2.5s"
    assert format_duration(timedelta(0)) == "0s"


def test_track_format_from_user_input() -> None:
    assert TrackFormat.from_user_input(" MP3 ") is TrackFormat.MP3

    with pytest.raises(ValueError, match="Valid options: mp3, wav"):
        _ = TrackFormat.from_user_input("aiff")
