"""
BookCatalog — the state holder the CLI and GUI talk to.

No Qt imports here; everything is testable without a display.

Pipeline for every mutation::

    new_books = reduce(books, action)   # pure
    if new_books is not books:
        store.save(new_books)           # exactly one full write
    books = new_books

Search term and page number are UI state kept next to the collection but
never stored with it.  Changing the search term resets the page to 1.
"""

import logging
from typing import Optional

from bookshelf.store.db import BookStore
from bookshelf.store.models import BookRecord

from .actions import AddBook, DeleteBookById, EditBookById
from .reducer import find_position, reduce
from .view import PAGE_SIZE, BookPage, compute_view

__all__ = ["BookCatalog"]

logger = logging.getLogger(__name__)


class BookCatalog:
    """
    Owns the in-memory collection plus search / page state.

    Attributes
    ──────────
    books        — current collection (replaced, never mutated in place)
    search_term  — title filter, "" for all
    page         — current 1-based page
    page_size    — records per page
    """

    def __init__(
        self,
        store: BookStore,
        books: Optional[list[BookRecord]] = None,
        page_size: int = PAGE_SIZE,
        key: str = "",
    ) -> None:
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")
        self._store = store
        self._key = key
        self.books:       list[BookRecord] = list(books or [])
        self.search_term: str              = ""
        self.page:        int              = 1
        self.page_size:   int              = page_size

    @classmethod
    def open(
        cls,
        store: BookStore,
        key: str = "",
        page_size: int = PAGE_SIZE,
    ) -> "BookCatalog":
        """
        Build a catalog from whatever *store* holds under *key*.

        An empty *key* means the store's own default key; later saves go
        to the same key.
        """
        books = store.load(key)
        logger.info("Opened catalog with %d books", len(books))
        return cls(store, books=books, page_size=page_size, key=key)

    # ── Mutations ──────────────────────────────────────────────────────────

    def dispatch(self, action) -> list[BookRecord]:
        """
        Reduce *action* into the collection and persist the result.

        A no-op action leaves the collection (and the store) untouched.
        A failed save is logged by the store; the in-memory result stands.
        """
        new_books = reduce(self.books, action)
        if new_books is self.books:
            return self.books
        self._store.save(new_books, key=self._key)
        self.books = new_books
        self.page = self._clamp(self.page)
        return self.books

    def add(self, title: str, author: str, year: str) -> BookRecord:
        """Append a new record and return it."""
        record = BookRecord(title=title, author=author, year=year)
        self.dispatch(AddBook(record))
        return record

    def edit(self, book_id: str, title: str, author: str, year: str) -> bool:
        """Replace the record with *book_id*; False if no such record."""
        before = self.books
        self.dispatch(EditBookById(book_id, BookRecord(title=title, author=author, year=year)))
        return self.books is not before

    def delete(self, book_id: str) -> bool:
        """Remove the record with *book_id*; False if no such record."""
        before = self.books
        self.dispatch(DeleteBookById(book_id))
        return self.books is not before

    # ── View state ─────────────────────────────────────────────────────────

    def get_view(
        self,
        search_term: Optional[str] = None,
        page: Optional[int] = None,
    ) -> BookPage:
        """Compute the visible page; defaults to the held search term and page."""
        return compute_view(
            self.books,
            self.search_term if search_term is None else search_term,
            self.page if page is None else page,
            self.page_size,
        )

    def set_search_term(self, term: str) -> None:
        """Change the title filter and go back to the first page."""
        self.search_term = term or ""
        self.page = 1

    def set_page(self, number: int) -> int:
        """Move to page *number*, clamped to the pages that exist."""
        self.page = self._clamp(number)
        return self.page

    def next_page(self) -> int:
        return self.set_page(self.page + 1)

    def previous_page(self) -> int:
        return self.set_page(self.page - 1)

    def position_of(self, book_id: str) -> Optional[int]:
        """0-based position of *book_id* in the full collection, or None."""
        return find_position(self.books, book_id)

    # ── Internal helpers ───────────────────────────────────────────────────

    def _clamp(self, number: int) -> int:
        last = self.get_view(page=1).total_pages
        return max(1, min(number, max(1, last)))
