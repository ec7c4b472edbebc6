"""bookshelf — personal book catalog with SQLite persistence."""

__version__ = "0.1.0"
