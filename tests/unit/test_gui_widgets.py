"""
Unit tests for bookshelf/gui/ Qt widgets — requires PyQt6 + offscreen display.

Run with: QT_QPA_PLATFORM=offscreen pytest tests/unit/test_gui_widgets.py

Coverage plan
─────────────
MainWindow   → 2 tests
CatalogPage  → 8 tests
─────────────────────────────────
Total        = 10 tests
"""

import os
import sys
from unittest.mock import patch

import pytest

# Ensure offscreen rendering when no display is available
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

PyQt6 = pytest.importorskip("PyQt6", reason="PyQt6 not installed")


# ─────────────────────────────────────────────────────────────────────────────
# Fixtures
# ─────────────────────────────────────────────────────────────────────────────

@pytest.fixture(scope="module")
def app():
    """Single QApplication for the entire module (can only have one per process)."""
    from PyQt6.QtWidgets import QApplication
    _app = QApplication.instance() or QApplication(sys.argv)
    yield _app


@pytest.fixture
def catalog():
    from bookshelf.core.catalog import BookCatalog
    from bookshelf.store.db import BookStore
    from bookshelf.store.kv import MemoryKeyValueStore
    return BookCatalog.open(BookStore(MemoryKeyValueStore()))


def _page(catalog):
    from bookshelf.gui.pages.catalog import CatalogPage
    return CatalogPage(catalog)


def _row_button(page, row, text):
    """Button labelled *text* in the Actions cell of *row*."""
    from PyQt6.QtWidgets import QPushButton
    cell = page._table.cellWidget(row, 3)
    return next(b for b in cell.findChildren(QPushButton) if b.text() == text)


# ─────────────────────────────────────────────────────────────────────────────
# 1. MainWindow
# ─────────────────────────────────────────────────────────────────────────────

class TestMainWindow:

    def test_creates_with_injected_catalog(self, app, catalog):
        from bookshelf.gui.main_window import MainWindow
        win = MainWindow(catalog=catalog)
        assert win.catalog is catalog

    def test_opens_sqlite_catalog_from_settings(self, app, tmp_path):
        from bookshelf.config import Settings
        from bookshelf.gui.main_window import MainWindow
        win = MainWindow(settings=Settings(db_path=str(tmp_path / "gui.db")))
        assert win.catalog.books == []


# ─────────────────────────────────────────────────────────────────────────────
# 2. CatalogPage
# ─────────────────────────────────────────────────────────────────────────────

class TestCatalogPage:

    def test_has_table_with_four_columns(self, app, catalog):
        page = _page(catalog)
        assert page._table.columnCount() == 4

    def test_add_form_adds_row_and_clears_inputs(self, app, catalog):
        page = _page(catalog)
        page._title_edit.setText("Dune")
        page._author_edit.setText("Herbert")
        page._year_edit.setText("1965")
        page._add_btn.click()
        assert [b.title for b in catalog.books] == ["Dune"]
        assert page._table.rowCount() == 1
        assert page._title_edit.text() == ""

    def test_add_form_requires_all_fields(self, app, catalog):
        page = _page(catalog)
        page._title_edit.setText("Dune")
        page._add_btn.click()
        assert catalog.books == []

    def test_table_shows_at_most_one_page(self, app, catalog):
        for i in range(7):
            catalog.add(f"Book {i}", "Author", "2000")
        page = _page(catalog)
        assert page._table.rowCount() == 5
        page._next_btn.click()
        assert page._table.rowCount() == 2
        assert not page._next_btn.isEnabled()

    def test_search_filters_and_resets_page(self, app, catalog):
        for i in range(7):
            catalog.add(f"Book {i}", "Author", "2000")
        catalog.add("Dune", "Herbert", "1965")
        page = _page(catalog)
        page._next_btn.click()
        page._search_edit.setText("dune")
        assert catalog.page == 1
        assert page._table.rowCount() == 1
        assert page._table.item(0, 0).text() == "Dune"

    def test_delete_button_removes_visible_record(self, app, catalog):
        catalog.add("Dune", "Herbert", "1965")
        catalog.add("Emma", "Austen", "1815")
        page = _page(catalog)
        page._search_edit.setText("emma")
        _row_button(page, 0, "Delete").click()
        assert [b.title for b in catalog.books] == ["Dune"]

    def test_edit_uses_prompts_and_cancel_aborts(self, app, catalog):
        catalog.add("Dune", "Herbert", "1965")
        page = _page(catalog)
        with patch.object(page, "_prompt", side_effect=["Dune", "Frank Herbert", "1965"]):
            _row_button(page, 0, "Edit").click()
        assert catalog.books[0].author == "Frank Herbert"
        with patch.object(page, "_prompt", side_effect=["X", None, "1"]):
            _row_button(page, 0, "Edit").click()
        assert catalog.books[0].title == "Dune"

    def test_numbered_page_buttons_jump_to_page(self, app, catalog):
        for i in range(12):
            catalog.add(f"Book {i}", "Author", "2000")
        page = _page(catalog)
        assert [b.text() for b in page._page_buttons] == ["1", "2", "3"]
        page._page_buttons[2].click()
        assert catalog.page == 3
        assert page._table.rowCount() == 2
        assert page._page_buttons[2].isChecked()
        assert not page._next_btn.isEnabled()
