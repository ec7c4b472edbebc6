"""
CLI entry point for bookshelf.

Usage
─────
  # Add a book
  python -m bookshelf add --title "Dune" --author "Herbert" --year 1965

  # Browse (5 per page), optionally filtered by title
  python -m bookshelf list
  python -m bookshelf list --search dune --page 2

  # Edit / delete by the position shown in `list`
  python -m bookshelf edit --position 1 --year 1966
  python -m bookshelf delete --position 2

  # Open the desktop window
  python -m bookshelf gui

Subcommands are implemented as standalone functions (cmd_add, cmd_list,
cmd_edit, cmd_delete) so they can be unit-tested without invoking argparse.
"""

import argparse
import logging
import sys
from typing import Optional

from bookshelf.config import Settings
from bookshelf.core.actions import DeleteBook, EditBook
from bookshelf.core.catalog import BookCatalog
from bookshelf.exceptions import ConfigError
from bookshelf.store.db import BookStore
from bookshelf.store.kv import SQLiteKeyValueStore
from bookshelf.store.models import BookRecord

__all__ = [
    "build_parser",
    "open_catalog",
    "cmd_add",
    "cmd_list",
    "cmd_edit",
    "cmd_delete",
    "main",
]

logger = logging.getLogger(__name__)


# ── Argument parser ────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    """
    Build and return the top-level argument parser.

    Subcommands: add | list | edit | delete | gui
    """
    parser = argparse.ArgumentParser(
        prog="bookshelf",
        description="Personal book catalog",
    )
    parser.add_argument(
        "--db",
        default=None,
        metavar="PATH",
        help="SQLite database path (default: $BOOKSHELF_DB or ~/.bookshelf/bookshelf.db)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Enable verbose debug logging",
    )

    sub = parser.add_subparsers(dest="subcommand")

    # ── add ───────────────────────────────────────────────────────────────
    add = sub.add_parser("add", help="Add a book to the catalog")
    add.add_argument("--title",  required=True, metavar="TITLE")
    add.add_argument("--author", required=True, metavar="AUTHOR")
    add.add_argument("--year",   required=True, metavar="YEAR")

    # ── list ──────────────────────────────────────────────────────────────
    lst = sub.add_parser("list", help="List books, one page at a time")
    lst.add_argument(
        "--search",
        default="",
        metavar="TERM",
        help="Only show books whose title contains TERM (case-insensitive)",
    )
    lst.add_argument(
        "--page",
        type=int,
        default=1,
        metavar="N",
        help="Page number to show (default: 1)",
    )

    # ── edit ──────────────────────────────────────────────────────────────
    edt = sub.add_parser("edit", help="Edit the book at a position")
    edt.add_argument(
        "--position",
        required=True,
        type=int,
        metavar="N",
        help="1-based position as shown by `list`",
    )
    edt.add_argument("--title",  default=None, metavar="TITLE")
    edt.add_argument("--author", default=None, metavar="AUTHOR")
    edt.add_argument("--year",   default=None, metavar="YEAR")

    # ── delete ────────────────────────────────────────────────────────────
    dlt = sub.add_parser("delete", help="Delete the book at a position")
    dlt.add_argument(
        "--position",
        required=True,
        type=int,
        metavar="N",
        help="1-based position as shown by `list`",
    )

    # ── gui ───────────────────────────────────────────────────────────────
    sub.add_parser("gui", help="Open the desktop window")

    return parser


# ── Helpers ───────────────────────────────────────────────────────────────────


def open_catalog(settings: Settings) -> BookCatalog:
    """Wire SQLite → BookStore → BookCatalog for *settings*."""
    kv = SQLiteKeyValueStore(settings.db_path)
    store = BookStore(kv, key=settings.storage_key)
    return BookCatalog.open(store, page_size=settings.page_size)


def _require_text(name: str, value: str) -> str:
    if not value.strip():
        raise ValueError(f"{name} must not be empty")
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        # undecodable argv bytes come through as lone surrogates
        raise ValueError(f"{name} is not valid UTF-8 text")
    return value


def _check_position(catalog: BookCatalog, position: int) -> int:
    """Convert a 1-based CLI position to a 0-based index, or raise."""
    if not 1 <= position <= len(catalog.books):
        raise ValueError(
            f"No book at position {position} (catalog has {len(catalog.books)})"
        )
    return position - 1


# ── Command implementations ───────────────────────────────────────────────────


def cmd_add(catalog: BookCatalog, title: str, author: str, year: str) -> BookRecord:
    """Append a book; all three fields must be non-empty."""
    record = catalog.add(
        title=_require_text("title", title),
        author=_require_text("author", author),
        year=_require_text("year", year),
    )
    print(f"Added [{len(catalog.books)}] {record}")
    return record


def cmd_list(catalog: BookCatalog, search: str = "", page: int = 1) -> None:
    """Print one page of books matching *search* to stdout."""
    catalog.set_search_term(search)
    view = catalog.get_view(page=max(1, page))
    if not view.visible_records:
        if view.total_matches:
            print(f"Page {view.page} is empty ({view.total_pages} page(s) available).")
        else:
            print("0 books found.")
        return
    for rec in view.visible_records:
        pos = catalog.position_of(rec.id)
        tag = f"[{pos + 1:>3}]"
        print(f"{tag}  {rec.title:<35} {rec.author:<25} {rec.year}")
    print(f"-- page {view.page}/{view.total_pages} ({view.total_matches} books) --")


def cmd_edit(
    catalog: BookCatalog,
    position: int,
    title: Optional[str] = None,
    author: Optional[str] = None,
    year: Optional[str] = None,
) -> BookRecord:
    """Replace fields of the book at 1-based *position*; omitted fields are kept."""
    index = _check_position(catalog, position)
    current = catalog.books[index]
    record = BookRecord(
        title=_require_text("title", current.title if title is None else title),
        author=_require_text("author", current.author if author is None else author),
        year=_require_text("year", current.year if year is None else year),
    )
    catalog.dispatch(EditBook(index, record))
    updated = catalog.books[index]
    print(f"Updated [{position}] {updated}")
    return updated


def cmd_delete(catalog: BookCatalog, position: int) -> BookRecord:
    """Remove the book at 1-based *position*."""
    index = _check_position(catalog, position)
    removed = catalog.books[index]
    catalog.dispatch(DeleteBook(index))
    print(f"Deleted {removed}")
    return removed


def cmd_gui(settings: Settings) -> int:
    """Run the PyQt6 window until it is closed; returns the Qt exit code."""
    from PyQt6.QtWidgets import QApplication
    from bookshelf.gui.main_window import MainWindow

    app = QApplication.instance() or QApplication(sys.argv)
    win = MainWindow(settings=settings)
    win.show()
    return app.exec()


# ── Entry point ───────────────────────────────────────────────────────────────


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point. Returns exit code."""
    parser = build_parser()
    ns = parser.parse_args(argv)

    level = logging.DEBUG if ns.debug else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")

    if ns.subcommand is None:
        parser.print_help()
        return 0

    try:
        settings = Settings.from_env()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if ns.db:
        settings.db_path = ns.db

    if ns.subcommand == "gui":
        return cmd_gui(settings)

    catalog = open_catalog(settings)

    try:
        if ns.subcommand == "add":
            cmd_add(catalog, title=ns.title, author=ns.author, year=ns.year)
        elif ns.subcommand == "list":
            cmd_list(catalog, search=ns.search, page=ns.page)
        elif ns.subcommand == "edit":
            cmd_edit(
                catalog,
                position=ns.position,
                title=ns.title,
                author=ns.author,
                year=ns.year,
            )
        elif ns.subcommand == "delete":
            cmd_delete(catalog, position=ns.position)
        else:
            parser.print_help()
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
