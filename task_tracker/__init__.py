"""Task tracker: a small task REST API on SQLite."""

__version__ = "0.1.0"
