"""
Runtime configuration.

Defaults can be overridden from the environment::

    BOOKSHELF_DB         — SQLite file path
    BOOKSHELF_KEY        — storage key for the collection
    BOOKSHELF_PAGE_SIZE  — records per page

CLI flags take precedence over both.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from bookshelf.core.view import PAGE_SIZE
from bookshelf.exceptions import ConfigError
from bookshelf.store.db import DEFAULT_KEY

__all__ = ["Settings", "DEFAULT_DB_PATH"]

DEFAULT_DB_PATH = "~/.bookshelf/bookshelf.db"


@dataclass
class Settings:
    """Runtime configuration for the CLI and GUI."""
    db_path:     str = DEFAULT_DB_PATH
    storage_key: str = DEFAULT_KEY
    page_size:   int = PAGE_SIZE

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from *environ* (default: os.environ).

        Raises:
            ConfigError if BOOKSHELF_PAGE_SIZE is not a positive integer.
        """
        env = os.environ if environ is None else environ
        raw_size = env.get("BOOKSHELF_PAGE_SIZE", "")
        page_size = PAGE_SIZE
        if raw_size:
            try:
                page_size = int(raw_size)
            except ValueError:
                raise ConfigError(f"BOOKSHELF_PAGE_SIZE must be an integer, got {raw_size!r}")
            if page_size < 1:
                raise ConfigError(f"BOOKSHELF_PAGE_SIZE must be >= 1, got {page_size}")
        return cls(
            db_path=env.get("BOOKSHELF_DB") or DEFAULT_DB_PATH,
            storage_key=env.get("BOOKSHELF_KEY") or DEFAULT_KEY,
            page_size=page_size,
        )
