"""
Key-value backends for the book store.

Usage::

    kv = SQLiteKeyValueStore(db_path="~/.bookshelf/bookshelf.db")
    kv.set("books", "[]")
    kv.get("books")      # -> "[]"
    kv.get("missing")    # -> None

Both backends expose the same three methods (get / set / delete) so that
BookStore can be handed either one.  I/O failures surface as StoreError.
"""

import logging
import sqlite3
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from bookshelf.exceptions import StoreError

__all__ = ["KeyValueStore", "SQLiteKeyValueStore", "MemoryKeyValueStore"]

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS kv (
    key   TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""


class KeyValueStore(ABC):
    """Interface shared by all backends."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the value under *key*, or None."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Overwrite the value under *key*."""

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove *key*; True if it existed."""


class SQLiteKeyValueStore(KeyValueStore):
    """
    Durable string store backed by a single SQLite table.

    The database file and schema are created lazily on first access.
    Every call opens its own context-managed connection; nothing is kept
    open between calls.
    """

    def __init__(self, db_path: str) -> None:
        self._db_path = Path(db_path).expanduser()
        self._ready = False

    @property
    def db_path(self) -> Path:
        return self._db_path

    # ── Internal helpers ──────────────────────────────────────────────────

    def _connect(self) -> sqlite3.Connection:
        try:
            if not self._ready:
                self._db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(str(self._db_path))
        except (sqlite3.Error, OSError) as exc:
            raise StoreError(f"cannot open {self._db_path}: {exc}") from exc
        try:
            conn.execute("PRAGMA journal_mode=WAL")
            if not self._ready:
                conn.executescript(_SCHEMA)
                self._ready = True
        except sqlite3.Error as exc:
            conn.close()
            raise StoreError(f"cannot open {self._db_path}: {exc}") from exc
        return conn

    # ── Public API ────────────────────────────────────────────────────────

    def get(self, key: str) -> Optional[str]:
        """Return the value stored under *key*, or None if absent."""
        conn = self._connect()
        try:
            with conn:
                row = conn.execute(
                    "SELECT value FROM kv WHERE key=?", (key,)
                ).fetchone()
        except (sqlite3.Error, UnicodeError) as exc:
            raise StoreError(f"read of {key!r} failed: {exc}") from exc
        finally:
            conn.close()
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        """Overwrite the value stored under *key*."""
        conn = self._connect()
        try:
            with conn:
                conn.execute(
                    "INSERT OR REPLACE INTO kv (key, value) VALUES (?, ?)",
                    (key, value),
                )
        except (sqlite3.Error, UnicodeError) as exc:
            raise StoreError(f"write of {key!r} failed: {exc}") from exc
        finally:
            conn.close()
        logger.debug("Wrote %d chars under %r", len(value), key)

    def delete(self, key: str) -> bool:
        """
        Remove *key*.

        Returns:
            True if a value was removed, False if the key was absent.
        """
        conn = self._connect()
        try:
            with conn:
                cur = conn.execute("DELETE FROM kv WHERE key=?", (key,))
        except (sqlite3.Error, UnicodeError) as exc:
            raise StoreError(f"delete of {key!r} failed: {exc}") from exc
        finally:
            conn.close()
        return cur.rowcount > 0


class MemoryKeyValueStore(KeyValueStore):
    """Process-local dict backend; used for tests and throwaway sessions."""

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None
