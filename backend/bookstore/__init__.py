"""In-memory book store HTTP service."""

__version__ = "1.0.0"
