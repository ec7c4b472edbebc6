from bookshelf.gui.pages.catalog import CatalogPage

__all__ = ["CatalogPage"]
