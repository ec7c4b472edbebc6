"""
cli — command-line interface for bookshelf.

Entry points
────────────
  python -m bookshelf   (via bookshelf/__main__.py)
  bookshelf             (via pyproject.toml [project.scripts])

Subcommands: add | list | edit | delete | gui
"""

from bookshelf.cli.main import build_parser, cmd_add, cmd_delete, cmd_edit, cmd_list, main

__all__ = ["build_parser", "cmd_add", "cmd_list", "cmd_edit", "cmd_delete", "main"]
