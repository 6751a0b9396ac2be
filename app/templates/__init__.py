"""HTML text renderers used by handlers."""
