"""
core — state management for the book catalog.

Public API
──────────
reduce        — pure (collection, action) → collection
compute_view  — search filter + pagination → BookPage
BookCatalog   — holds collection / search / page, persists on change
AddBook, DeleteBook, EditBook, DeleteBookById, EditBookById — actions
"""

from .actions import AddBook, DeleteBook, DeleteBookById, EditBook, EditBookById
from .catalog import BookCatalog
from .reducer import reduce
from .view import PAGE_SIZE, BookPage, compute_view

__all__ = [
    "AddBook",
    "DeleteBook",
    "DeleteBookById",
    "EditBook",
    "EditBookById",
    "BookCatalog",
    "BookPage",
    "PAGE_SIZE",
    "compute_view",
    "reduce",
]
