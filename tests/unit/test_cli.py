"""
Unit tests for bookshelf/cli/

Coverage plan
─────────────
arg parsing    → 5 tests  (add / list / edit / delete / gui subcommands)
add command    → 3 tests
list command   → 4 tests  (empty, populated, search + positions, paging)
edit / delete  → 4 tests
main()         → 3 tests  (end-to-end through a temp SQLite file)
─────────────────────────────────────────────────────────────────
Total          = 19 tests
"""

import pytest


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def _parse(args: list[str]):
    """Call the CLI argument parser and return the parsed namespace."""
    from bookshelf.cli.main import build_parser
    parser = build_parser()
    return parser.parse_args(args)


@pytest.fixture
def catalog(tmp_path):
    """Fresh catalog over a temporary SQLite file."""
    from bookshelf.cli.main import open_catalog
    from bookshelf.config import Settings
    return open_catalog(Settings(db_path=str(tmp_path / "cli_test.db")))


def _fill(catalog, titles):
    for t in titles:
        catalog.add(t, "Author", "2000")


# ─────────────────────────────────────────────────────────────────────────────
# 1. Argument parsing
# ─────────────────────────────────────────────────────────────────────────────

class TestArgParsing:

    def test_add_subcommand_parses_fields(self):
        ns = _parse(["add", "--title", "Dune", "--author", "Herbert", "--year", "1965"])
        assert ns.subcommand == "add"
        assert (ns.title, ns.author, ns.year) == ("Dune", "Herbert", "1965")

    def test_list_defaults(self):
        ns = _parse(["list"])
        assert ns.search == ""
        assert ns.page == 1

    def test_edit_fields_default_to_none(self):
        ns = _parse(["edit", "--position", "2", "--year", "1966"])
        assert ns.position == 2
        assert ns.title is None
        assert ns.year == "1966"

    def test_delete_requires_position(self):
        with pytest.raises(SystemExit):
            _parse(["delete"])

    def test_global_db_flag(self):
        ns = _parse(["--db", "/tmp/x.db", "gui"])
        assert ns.db == "/tmp/x.db"
        assert ns.subcommand == "gui"


# ─────────────────────────────────────────────────────────────────────────────
# 2. add command
# ─────────────────────────────────────────────────────────────────────────────

class TestAddCommand:

    def test_add_appends_and_prints(self, catalog, capsys):
        from bookshelf.cli.main import cmd_add
        cmd_add(catalog, title="Dune", author="Herbert", year="1965")
        assert [b.title for b in catalog.books] == ["Dune"]
        assert "Dune" in capsys.readouterr().out

    def test_add_rejects_blank_field(self, catalog):
        from bookshelf.cli.main import cmd_add
        with pytest.raises(ValueError):
            cmd_add(catalog, title="  ", author="Herbert", year="1965")
        assert catalog.books == []

    def test_add_rejects_undecodable_text(self, catalog):
        from bookshelf.cli.main import cmd_add
        with pytest.raises(ValueError, match="UTF-8"):
            cmd_add(catalog, title="caf\udce9", author="Herbert", year="1965")
        assert catalog.books == []


# ─────────────────────────────────────────────────────────────────────────────
# 3. list command
# ─────────────────────────────────────────────────────────────────────────────

class TestListCommand:

    def test_list_empty_catalog(self, catalog, capsys):
        from bookshelf.cli.main import cmd_list
        cmd_list(catalog)
        assert "0 books" in capsys.readouterr().out

    def test_list_prints_titles_and_page_footer(self, catalog, capsys):
        from bookshelf.cli.main import cmd_list
        _fill(catalog, ["Dune", "Emma"])
        cmd_list(catalog)
        out = capsys.readouterr().out
        assert "Dune" in out and "Emma" in out
        assert "page 1/1" in out

    def test_search_shows_full_catalog_positions(self, catalog, capsys):
        from bookshelf.cli.main import cmd_list
        _fill(catalog, ["Dune", "Emma", "Dune Messiah"])
        cmd_list(catalog, search="dune")
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].startswith("[  1]")
        assert lines[1].startswith("[  3]")
        assert "Emma" not in "\n".join(lines)

    def test_page_past_end_reports_available_pages(self, catalog, capsys):
        from bookshelf.cli.main import cmd_list
        _fill(catalog, [f"Book {i}" for i in range(6)])
        cmd_list(catalog, page=5)
        assert "2 page(s)" in capsys.readouterr().out


# ─────────────────────────────────────────────────────────────────────────────
# 4. edit / delete commands
# ─────────────────────────────────────────────────────────────────────────────

class TestEditDeleteCommands:

    def test_edit_changes_only_given_fields(self, catalog):
        from bookshelf.cli.main import cmd_edit
        catalog.add("Dune", "Herbert", "1965")
        cmd_edit(catalog, position=1, year="1966")
        assert catalog.books[0].to_dict() == {"title": "Dune", "author": "Herbert", "year": "1966"}

    def test_edit_bad_position_raises(self, catalog):
        from bookshelf.cli.main import cmd_edit
        with pytest.raises(ValueError):
            cmd_edit(catalog, position=1, title="X")

    def test_delete_removes_book(self, catalog):
        from bookshelf.cli.main import cmd_delete
        _fill(catalog, ["Dune", "Emma"])
        removed = cmd_delete(catalog, position=1)
        assert removed.title == "Dune"
        assert [b.title for b in catalog.books] == ["Emma"]

    @pytest.mark.parametrize("position", [0, 3, -1])
    def test_delete_bad_position_raises(self, catalog, position):
        from bookshelf.cli.main import cmd_delete
        _fill(catalog, ["Dune", "Emma"])
        with pytest.raises(ValueError):
            cmd_delete(catalog, position=position)
        assert len(catalog.books) == 2


# ─────────────────────────────────────────────────────────────────────────────
# 5. main()
# ─────────────────────────────────────────────────────────────────────────────

class TestMain:

    def test_add_then_list_persists_between_runs(self, tmp_path, capsys):
        from bookshelf.cli.main import main
        db = str(tmp_path / "main.db")
        assert main(["--db", db, "add", "--title", "Dune", "--author", "Herbert", "--year", "1965"]) == 0
        assert main(["--db", db, "list"]) == 0
        assert "Herbert" in capsys.readouterr().out

    def test_bad_position_exits_with_1(self, tmp_path, capsys):
        from bookshelf.cli.main import main
        db = str(tmp_path / "main.db")
        assert main(["--db", db, "delete", "--position", "4"]) == 1
        assert "No book at position 4" in capsys.readouterr().err

    def test_no_subcommand_prints_help(self, capsys):
        from bookshelf.cli.main import main
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()
