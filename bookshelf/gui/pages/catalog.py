"""
CatalogPage — the single page of the bookshelf GUI.

All state lives in a BookCatalog; this widget only forwards user input to
it and re-renders the current view afterwards.

Layout
──────
  ┌─────────────────────────────────────────────┐
  │ Search: [___________________________]       │
  │ [Title____] [Author___] [Year_] [Add Book]  │
  │ ┌─────────────────────────────────────────┐ │
  │ │ Title │ Author  │ Year │ Actions        │ │
  │ │ Dune  │ Herbert │ 1965 │ [Edit][Delete] │ │
  │ └─────────────────────────────────────────┘ │
  │     [Previous] [1] [2] [3] [Next]           │
  └─────────────────────────────────────────────┘
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import (
    QHBoxLayout,
    QInputDialog,
    QLabel,
    QLineEdit,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from bookshelf.core.catalog import BookCatalog
from bookshelf.store.models import BookRecord

__all__ = ["CatalogPage"]

logger = logging.getLogger(__name__)

# Column indices
_COL_TITLE   = 0
_COL_AUTHOR  = 1
_COL_YEAR    = 2
_COL_ACTIONS = 3
_HEADERS = ["Title", "Author", "Publication Year", "Actions"]


class CatalogPage(QWidget):
    """Search, add, edit, delete and page through the catalog."""

    def __init__(self, catalog: BookCatalog, parent: QWidget = None) -> None:
        super().__init__(parent)
        self._vm = catalog
        self._page_buttons: list[QPushButton] = []
        self._build_ui()
        self.refresh()

    # ── UI construction ────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        layout.addWidget(QLabel("<b>Book Repository</b>"))

        # Search bar
        search_row = QHBoxLayout()
        search_row.addWidget(QLabel("Search:"))
        self._search_edit = QLineEdit()
        self._search_edit.setPlaceholderText("Search by title…")
        self._search_edit.textChanged.connect(self._on_search_changed)
        search_row.addWidget(self._search_edit)
        layout.addLayout(search_row)

        # Add form
        form_row = QHBoxLayout()
        self._title_edit  = QLineEdit()
        self._author_edit = QLineEdit()
        self._year_edit   = QLineEdit()
        self._title_edit.setPlaceholderText("Title")
        self._author_edit.setPlaceholderText("Author")
        self._year_edit.setPlaceholderText("Publication Year")
        self._add_btn = QPushButton("Add Book")
        self._add_btn.clicked.connect(self._on_add_clicked)
        for w in (self._title_edit, self._author_edit, self._year_edit, self._add_btn):
            form_row.addWidget(w)
        layout.addLayout(form_row)

        # Book table
        self._table = QTableWidget(0, len(_HEADERS))
        self._table.setHorizontalHeaderLabels(_HEADERS)
        self._table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self._table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        self._table.horizontalHeader().setStretchLastSection(True)
        layout.addWidget(self._table)

        # Pager
        self._pager_row = QHBoxLayout()
        self._prev_btn = QPushButton("Previous")
        self._prev_btn.clicked.connect(self._on_previous)
        self._next_btn = QPushButton("Next")
        self._next_btn.clicked.connect(self._on_next)
        self._pager_row.addStretch()
        self._pager_row.addWidget(self._prev_btn)
        self._pager_row.addWidget(self._next_btn)
        self._pager_row.addStretch()
        layout.addLayout(self._pager_row)

        self._status = QLabel("")
        layout.addWidget(self._status)

    # ── Slots ──────────────────────────────────────────────────────────────

    def _on_search_changed(self, text: str) -> None:
        self._vm.set_search_term(text)
        self.refresh()

    def _on_add_clicked(self) -> None:
        fields = [
            self._title_edit.text().strip(),
            self._author_edit.text().strip(),
            self._year_edit.text().strip(),
        ]
        if not all(fields):
            self._status.setText("Title, author and year are all required.")
            return
        self._vm.add(*fields)
        for w in (self._title_edit, self._author_edit, self._year_edit):
            w.clear()
        self._status.setText("")
        self.refresh()

    def _on_edit(self, record: BookRecord) -> None:
        title = self._prompt("New title:", record.title)
        author = self._prompt("New author:", record.author)
        year = self._prompt("New publication year:", record.year)
        if title and author and year:
            self._vm.edit(record.id, title, author, year)
            self.refresh()

    def _on_delete(self, record: BookRecord) -> None:
        self._vm.delete(record.id)
        self.refresh()

    def _on_previous(self) -> None:
        self._vm.previous_page()
        self.refresh()

    def _on_next(self) -> None:
        self._vm.next_page()
        self.refresh()

    def _on_goto(self, number: int) -> None:
        self._vm.set_page(number)
        self.refresh()

    # ── Internal helpers ───────────────────────────────────────────────────

    def _prompt(self, label: str, current: str) -> Optional[str]:
        """Ask for one value; None when the dialog is cancelled."""
        text, ok = QInputDialog.getText(self, "Edit Book", label, text=current)
        return text.strip() if ok else None

    def _row_actions(self, record: BookRecord) -> QWidget:
        cell = QWidget()
        row = QHBoxLayout(cell)
        row.setContentsMargins(0, 0, 0, 0)
        edit_btn = QPushButton("Edit")
        delete_btn = QPushButton("Delete")
        edit_btn.clicked.connect(lambda _=False, r=record: self._on_edit(r))
        delete_btn.clicked.connect(lambda _=False, r=record: self._on_delete(r))
        row.addWidget(edit_btn)
        row.addWidget(delete_btn)
        return cell

    def _rebuild_page_buttons(self, total_pages: int) -> None:
        for btn in self._page_buttons:
            self._pager_row.removeWidget(btn)
            btn.deleteLater()
        self._page_buttons = []
        insert_at = self._pager_row.indexOf(self._next_btn)
        for number in range(1, total_pages + 1):
            btn = QPushButton(str(number))
            btn.setCheckable(True)
            btn.setChecked(number == self._vm.page)
            btn.clicked.connect(lambda _=False, n=number: self._on_goto(n))
            self._pager_row.insertWidget(insert_at + number - 1, btn)
            self._page_buttons.append(btn)

    # ── Public API ─────────────────────────────────────────────────────────

    def refresh(self) -> None:
        """Re-render the table and pager from the catalog's current view."""
        view = self._vm.get_view()
        records = view.visible_records
        self._table.setRowCount(len(records))
        for row, rec in enumerate(records):
            self._table.setItem(row, _COL_TITLE,  QTableWidgetItem(rec.title))
            self._table.setItem(row, _COL_AUTHOR, QTableWidgetItem(rec.author))
            self._table.setItem(row, _COL_YEAR,   QTableWidgetItem(rec.year))
            self._table.setCellWidget(row, _COL_ACTIONS, self._row_actions(rec))

        self._rebuild_page_buttons(view.total_pages)
        self._prev_btn.setEnabled(self._vm.page > 1)
        self._next_btn.setEnabled(self._vm.page < view.total_pages)
