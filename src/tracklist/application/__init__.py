"""Application layer orchestrating features for the interfaces."""
