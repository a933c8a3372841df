"""Track domain models."""
