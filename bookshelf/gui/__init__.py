"""
gui — PyQt6 front-end for bookshelf.

Public API
──────────
MainWindow   — top-level application window
pages        — individual pages (CatalogPage)
"""

from bookshelf.gui.main_window import MainWindow

__all__ = ["MainWindow"]
