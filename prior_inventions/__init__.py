"""Generate a Prior Inventions document from GitHub repositories."""

__version__ = "0.1.0"
