"""Application services."""

from .playlist_service import PlaylistLibraryService

__all__ = ["PlaylistLibraryService"]
