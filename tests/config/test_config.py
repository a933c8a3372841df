"""Test configuration management."""

from pathlib import Path

from tracklist.config.config import TRACK_GAP_SECONDS_DEFAULT, Config
from tracklist.config.paths import default_config_path


def test_default_config(fresh_config: Path) -> None:
    """Default configuration is created at the portable repo location."""

    config = Config()
    assert config.playlist_dir is None
    assert config.log_file is None
    assert config.track_gap_seconds == TRACK_GAP_SECONDS_DEFAULT
    assert config.simulate_playback is True

    config.save()
    assert default_config_path().exists()


def test_load_creates_missing_file(fresh_config: Path) -> None:
    assert not default_config_path().exists()

    loaded = Config.load()

    assert default_config_path().exists()
    assert loaded.playlist_dir is None


def test_save_load_toml(fresh_config: Path) -> None:
    """Values written to TOML come back with the right types."""

    original = Config(
        playlist_dir=Path("/music/playlists"),
        log_file=Path("/logs/tracklist.log"),
        track_gap_seconds=1.25,
        simulate_playback=False,
    )
    original.save()

    Config._instance = None  # pyright: ignore[reportPrivateUsage] - reset singleton for test
    loaded = Config.load()

    assert loaded.playlist_dir == Path("/music/playlists")
    assert loaded.log_file == Path("/logs/tracklist.log")
    assert loaded.track_gap_seconds == 1.25
    assert loaded.simulate_playback is False


def test_string_paths_are_converted() -> None:
    config = Config(playlist_dir="lists", log_file="")  # pyright: ignore[reportArgumentType]

    assert config.playlist_dir == Path("lists")
    assert config.log_file is None


def test_missing_keys_get_defaults(fresh_config: Path) -> None:
    target = default_config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    _ = target.write_text('playlist_dir = "saved"\nunknown_key = 3\n', encoding="utf-8")

    loaded = Config.load()

    assert loaded.playlist_dir == Path("saved")
    assert loaded.track_gap_seconds == TRACK_GAP_SECONDS_DEFAULT
    assert loaded.simulate_playback is True


def test_singleton_behavior(fresh_config: Path) -> None:
    first = Config.load()
    second = Config.load()

    assert first is second
