"""Rich console handler with dedicated rendering for playlist events.

Where: platform/logging/handlers.py
What: Style structured playlist log records (save, load, playback) with icons.
Why: Keep console output readable without coupling features to Rich.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class PlaylistRichHandler(RichHandler):
    """Rich handler that renders ``playlist_event`` records compactly."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "playlist.saved": ("💾", "green"),
        "playlist.loaded": ("📂", "cyan"),
        "playlist.line.skipped": ("↪️", "yellow"),
        "playlist.track.start": ("🎶", "blue"),
        "playlist.track.finish": ("✅", "green"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 3

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Render ``path`` keeping only its trailing segments."""

        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        if len(body_parts) > self._PATH_SEGMENT_LIMIT:
            display = "…" + separator + separator.join(body_parts[-self._PATH_SEGMENT_LIMIT:])
        else:
            display = str(pure_path)

        text = Text()
        for char in display:
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _render_playlist_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured playlist events with dedicated styling."""

        event = getattr(record, "playlist_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        playlist = getattr(record, "playlist", None)
        path = getattr(record, "path", None)

        if event == "playlist.saved":
            track_count = getattr(record, "track_count", None)
            _ = body.append(f"Saved '{playlist}'")
            if isinstance(track_count, int):
                _ = body.append(f" [tracks={track_count}]")
        elif event == "playlist.loaded":
            track_count = getattr(record, "track_count", None)
            skipped = getattr(record, "skipped_lines", None)
            _ = body.append(f"Loaded '{playlist}'")
            metrics: list[str] = []
            if isinstance(track_count, int):
                metrics.append(f"tracks={track_count}")
            if isinstance(skipped, int) and skipped > 0:
                metrics.append(f"skipped={skipped}")
            if metrics:
                _ = body.append(" [" + ", ".join(metrics) + "]")
        elif event == "playlist.line.skipped":
            line_number = getattr(record, "line_number", None)
            reason = getattr(record, "reason", None)
            _ = body.append("Skipped track line")
            if isinstance(line_number, int):
                _ = body.append(f" {line_number}")
            if reason:
                _ = body.append(f" ({reason})")
        else:
            sequence = getattr(record, "sequence", None)
            total = getattr(record, "total_tracks", None)
            if isinstance(sequence, int) and isinstance(total, int) and total > 0:
                _ = body.append(f"[{sequence}/{total}] ")
            prefix = "Now playing " if event == "playlist.track.start" else "Finished "
            _ = body.append(prefix)
            title = getattr(record, "title", None)
            artist = getattr(record, "artist", None)
            _ = body.append(" - ".join(part for part in [artist, title] if part))

        if path:
            _ = body.append(" @ ")
            _ = body.append_text(self._format_path(str(path)))

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for playlist events."""

        playlist_text = self._render_playlist_message(record)
        if playlist_text is not None:
            return playlist_text

        return super().render_message(record, message)


__all__ = ["PlaylistRichHandler"]
