"""Use-case ports for the playlists feature."""

from .ports import PlaylistStore

__all__ = ["PlaylistStore"]
