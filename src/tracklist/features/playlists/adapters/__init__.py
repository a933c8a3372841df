"""Storage adapters for playlists."""
