"""Playlist domain: container, codec, and errors."""
