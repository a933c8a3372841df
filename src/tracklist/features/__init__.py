"""Feature packages: tracks and playlists."""
