"""Local filesystem playlist storage."""

from .local import LocalPlaylistStore

__all__ = ["LocalPlaylistStore"]
