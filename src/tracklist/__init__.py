"""tracklist: MP3/WAV playlists persisted as pipe-delimited text files."""

__version__ = "0.1.0"
