"""src/tracklist/ui/cli/display/playlist_view.py
What: Render saved playlist listings and track tables for the CLI.
Why: Keep console output formatting consistent across commands.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tracklist.features.playlists import LoadedPlaylist
from tracklist.features.tracks import MP3Track, Track, WAVTrack, format_duration


def _extra_label(track: Track) -> str:
    if isinstance(track, MP3Track):
        return f"{track.bitrate_kbps} kbps"
    if isinstance(track, WAVTrack):
        return f"{track.sample_rate_hz} Hz"
    return "-"


@final
class PlaylistDisplay:
    """Handles playlist display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_saved(self, names: Sequence[str], *, quiet: bool = False) -> None:
        """Print every saved playlist name."""

        if quiet:
            for name in names:
                self.console.print(name, markup=False, highlight=False)
            return

        self.console.print(f"\n[bold]Saved playlists:[/bold] {len(names)}")
        for name in names:
            self.console.print(f"  • {escape(name)}")

    def show_playlist(self, loaded: LoadedPlaylist) -> None:
        """Render the tracks of ``loaded`` as a table."""

        playlist = loaded.playlist
        table = Table(title=escape(playlist.name), title_style="bold")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Title", style="cyan")
        table.add_column("Artist", style="magenta")
        table.add_column("Duration", justify="right")
        table.add_column("Format", style="green")
        table.add_column("Quality", justify="right")

        for index, track in enumerate(playlist.tracks):
            table.add_row(
                str(index),
                escape(track.title),
                escape(track.artist),
                format_duration(track.duration),
                escape(track.format),
                _extra_label(track),
            )

        self.console.print(table)
        self.console.print(
            f"Tracks: {len(playlist)}  Total duration: "
            f"{format_duration(playlist.total_duration())}"
        )
        if loaded.skipped_lines:
            self.console.print(
                f"[yellow]Skipped malformed lines: {loaded.skipped_lines}[/yellow]"
            )


__all__ = ["PlaylistDisplay"]
