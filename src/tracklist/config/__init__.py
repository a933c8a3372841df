"""Configuration package for tracklist."""
