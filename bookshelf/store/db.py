"""
BookStore — persistence layer for the book collection.

Usage::

    store = BookStore(SQLiteKeyValueStore("~/.bookshelf/bookshelf.db"))

    books = store.load()          # [] when nothing stored or data corrupt
    store.save(books + [record])  # full overwrite under "books"

The stored value is a JSON array of ``{"title", "author", "year"}``
objects in collection order.  Record identifiers live in memory only.

Failures never propagate: a bad or missing value loads as an empty
collection and a failed write returns False.  Both are logged.
"""

import json
import logging
from typing import Iterable

from bookshelf.exceptions import DecodeError, StoreError
from bookshelf.store.kv import KeyValueStore
from bookshelf.store.models import BookRecord

__all__ = ["BookStore", "DEFAULT_KEY", "encode_books", "decode_books"]

logger = logging.getLogger(__name__)

DEFAULT_KEY = "books"


# ── Codec ─────────────────────────────────────────────────────────────────────

def encode_books(books: Iterable[BookRecord]) -> str:
    """Serialise *books* to the persisted JSON array."""
    return json.dumps([b.to_dict() for b in books], ensure_ascii=False)


def decode_books(raw: str) -> list[BookRecord]:
    """
    Parse the persisted JSON array into fresh BookRecords.

    Raises:
        DecodeError if *raw* is not JSON or not an array of book objects.
    """
    try:
        data = json.loads(raw)
    except (TypeError, ValueError, RecursionError) as exc:
        raise DecodeError(f"stored value is not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise DecodeError(f"expected a JSON array, got {type(data).__name__}")
    books: list[BookRecord] = []
    for i, entry in enumerate(data):
        try:
            books.append(BookRecord.from_dict(entry))
        except (KeyError, TypeError) as exc:
            raise DecodeError(f"entry {i} is not a book record: {exc}") from exc
    return books


# ── Store ─────────────────────────────────────────────────────────────────────

class BookStore:
    """
    Load/save interface over an injected KeyValueStore.

    Every save is a full replace of the value under *key*; there is no
    incremental update, batching or retry.
    """

    def __init__(self, kv: KeyValueStore, key: str = DEFAULT_KEY) -> None:
        self._kv = kv
        self.key = key

    def load(self, key: str = "") -> list[BookRecord]:
        """
        Return the stored collection, or an empty list on any failure.
        """
        key = key or self.key
        try:
            raw = self._kv.get(key)
        except StoreError as exc:
            logger.error("Could not read %r: %s", key, exc)
            return []
        if raw is None:
            logger.debug("No stored collection under %r", key)
            return []
        try:
            books = decode_books(raw)
        except DecodeError as exc:
            logger.warning("Discarding stored collection under %r: %s", key, exc)
            return []
        logger.debug("Loaded %d books from %r", len(books), key)
        return books

    def save(self, books: Iterable[BookRecord], key: str = "") -> bool:
        """
        Overwrite the stored collection with *books*.

        Returns:
            True on success, False if the backend rejected the write.
        """
        key = key or self.key
        payload = encode_books(books)
        try:
            self._kv.set(key, payload)
        except StoreError as exc:
            logger.error("Could not save %r: %s", key, exc)
            return False
        return True
