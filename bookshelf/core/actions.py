"""Action types accepted by the collection reducer."""

from dataclasses import dataclass
from typing import Union

from bookshelf.store.models import BookRecord

__all__ = [
    "AddBook",
    "DeleteBook",
    "EditBook",
    "DeleteBookById",
    "EditBookById",
    "Action",
]


@dataclass(frozen=True)
class AddBook:
    """Append *record* to the end of the collection."""
    record: BookRecord


@dataclass(frozen=True)
class DeleteBook:
    """Remove the record at *position* (0-based, full collection)."""
    position: int


@dataclass(frozen=True)
class EditBook:
    """Replace the record at *position* (0-based, full collection)."""
    position: int
    record:   BookRecord


@dataclass(frozen=True)
class DeleteBookById:
    """Remove the record whose identifier is *book_id*."""
    book_id: str


@dataclass(frozen=True)
class EditBookById:
    """Replace the record whose identifier is *book_id*."""
    book_id: str
    record:  BookRecord


Action = Union[AddBook, DeleteBook, EditBook, DeleteBookById, EditBookById]
