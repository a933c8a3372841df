"""Cross-cutting infrastructure shared by every feature."""
