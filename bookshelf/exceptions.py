"""
Project-wide custom exception hierarchy.
All modules raise subclasses of BookshelfError — never bare Exception.
"""

__all__ = [
    "BookshelfError",
    "StoreError",
    "DecodeError",
    "ConfigError",
]


class BookshelfError(Exception):
    """Root exception for all bookshelf errors."""


# ── Store ─────────────────────────────────────────────────────────────────────

class StoreError(BookshelfError):
    """Raised on SQLite / key-value store I/O errors."""


class DecodeError(StoreError):
    """Raised when a stored value cannot be decoded into a book collection."""


# ── Config ────────────────────────────────────────────────────────────────────

class ConfigError(BookshelfError):
    """Raised when a configuration value is missing or malformed."""
