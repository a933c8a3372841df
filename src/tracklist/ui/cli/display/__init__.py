"""Display helpers for the CLI."""

from .playlist_view import PlaylistDisplay

__all__ = ["PlaylistDisplay"]
