"""Domain types mirrored from the backend contract."""
