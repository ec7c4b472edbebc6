"""
store — persistence layer for the book collection.

Public API
──────────
BookRecord           — frozen dataclass representing one catalog entry
BookStore            — load / save of the full collection under one key
SQLiteKeyValueStore  — durable key-value backend (one SQLite table)
MemoryKeyValueStore  — in-process key-value backend
"""

from bookshelf.store.models import BookRecord
from bookshelf.store.kv import KeyValueStore, MemoryKeyValueStore, SQLiteKeyValueStore
from bookshelf.store.db import BookStore

__all__ = [
    "BookRecord",
    "BookStore",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "SQLiteKeyValueStore",
]
