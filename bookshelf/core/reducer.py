"""
Collection reducer — pure (collection, action) → collection.

``reduce`` never mutates its input and never raises.  When an action has
no effect (out-of-range position, unknown id, unrecognised action) the
input list itself is returned, so callers can detect a no-op with ``is``.
"""

import dataclasses
import logging
from typing import Optional

from bookshelf.store.models import BookRecord

from .actions import AddBook, DeleteBook, DeleteBookById, EditBook, EditBookById

__all__ = ["reduce", "find_position"]

logger = logging.getLogger(__name__)


def find_position(books: list[BookRecord], book_id: str) -> Optional[int]:
    """Return the index of the record with *book_id*, or None."""
    for i, book in enumerate(books):
        if book.id == book_id:
            return i
    return None


def _in_bounds(books: list[BookRecord], position) -> bool:
    # bool is an int subclass; True/False are not positions
    if not isinstance(position, int) or isinstance(position, bool):
        return False
    return 0 <= position < len(books)


def _delete(books: list[BookRecord], position) -> list[BookRecord]:
    if not _in_bounds(books, position):
        logger.debug("Delete ignored: position %r out of range", position)
        return books
    return books[:position] + books[position + 1:]


def _edit(books: list[BookRecord], position, record) -> list[BookRecord]:
    if not _in_bounds(books, position) or not isinstance(record, BookRecord):
        logger.debug("Edit ignored: position %r out of range", position)
        return books
    # the edited slot keeps its identity
    replacement = dataclasses.replace(record, id=books[position].id)
    return books[:position] + [replacement] + books[position + 1:]


def reduce(books: list[BookRecord], action) -> list[BookRecord]:
    """Apply *action* to *books* and return the resulting collection."""
    if isinstance(action, AddBook):
        if not isinstance(action.record, BookRecord):
            return books
        return books + [action.record]

    if isinstance(action, DeleteBook):
        return _delete(books, action.position)

    if isinstance(action, EditBook):
        return _edit(books, action.position, action.record)

    if isinstance(action, DeleteBookById):
        pos = find_position(books, action.book_id)
        return books if pos is None else _delete(books, pos)

    if isinstance(action, EditBookById):
        pos = find_position(books, action.book_id)
        return books if pos is None else _edit(books, pos, action.record)

    logger.debug("Unrecognised action ignored: %r", action)
    return books
