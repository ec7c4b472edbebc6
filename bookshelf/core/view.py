"""
View computation — search filtering and pagination.

Pure functions of (collection, search term, page, page size).  The page
number is not clamped here: any page ≥ 1 is accepted and a page past the
end simply has no records.
"""

import math
from dataclasses import dataclass, field

from bookshelf.store.models import BookRecord

__all__ = ["PAGE_SIZE", "BookPage", "filter_books", "compute_view"]

PAGE_SIZE = 5


@dataclass
class BookPage:
    """
    One rendered page of the catalog.

    Attributes
    ──────────
    visible_records — records on this page, in collection order
    total_pages     — ceil(total_matches / page_size); 0 if nothing matches
    page            — the 1-based page number this view was computed for
    total_matches   — number of records passing the search filter
    """
    visible_records: list[BookRecord] = field(default_factory=list)
    total_pages:     int              = 0
    page:            int              = 1
    total_matches:   int              = 0

    @property
    def is_empty(self) -> bool:
        return not self.visible_records


def filter_books(books: list[BookRecord], search_term: str = "") -> list[BookRecord]:
    """Return records whose title contains *search_term* (case-insensitive)."""
    if not search_term:
        return list(books)
    query = search_term.lower()
    return [b for b in books if query in b.title.lower()]


def compute_view(
    books: list[BookRecord],
    search_term: str = "",
    page: int = 1,
    page_size: int = PAGE_SIZE,
) -> BookPage:
    """
    Filter *books* by *search_term* and cut out page *page*.

    Raises:
        ValueError if page or page_size is below 1.
    """
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")

    matches = filter_books(books, search_term)
    start = (page - 1) * page_size
    return BookPage(
        visible_records=matches[start:start + page_size],
        total_pages=math.ceil(len(matches) / page_size),
        page=page,
        total_matches=len(matches),
    )
