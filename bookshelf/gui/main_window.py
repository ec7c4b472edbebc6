"""
MainWindow — top-level application window for the bookshelf GUI.

Hosts a single CatalogPage.  The catalog is opened from the SQLite file
named in Settings unless one is passed in (tests pass an in-memory one).
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import QMainWindow, QWidget

from bookshelf.config import Settings
from bookshelf.core.catalog import BookCatalog
from bookshelf.gui.pages.catalog import CatalogPage
from bookshelf.store.db import BookStore
from bookshelf.store.kv import SQLiteKeyValueStore

__all__ = ["MainWindow"]

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Root window: builds the catalog and shows the catalog page."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        catalog: Optional[BookCatalog] = None,
        parent: QWidget = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Book Repository")
        self.resize(720, 420)

        if catalog is None:
            settings = settings or Settings.from_env()
            store = BookStore(SQLiteKeyValueStore(settings.db_path), key=settings.storage_key)
            catalog = BookCatalog.open(store, page_size=settings.page_size)
            logger.info("Using database %s", settings.db_path)
        self.catalog = catalog

        self._page = CatalogPage(self.catalog)
        self.setCentralWidget(self._page)
