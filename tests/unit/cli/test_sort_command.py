"""Tests for the sort CLI command."""

import json
from pathlib import Path

from loctext.cli import main


class TestSortCommand:
    """Tests for loctext sort."""

    def test_sorts_stdin_with_root(self, runner, cli_obj) -> None:
        """Without a locale, accented letters sort with their base letter."""
        result = runner.invoke(
            main, ["sort"], input="zebra\nöl\napple\n".encode(), obj=cli_obj
        )

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["apple", "öl", "zebra"]

    def test_sorts_with_locale(self, runner, cli_obj) -> None:
        """Swedish sorts ö after z."""
        result = runner.invoke(
            main,
            ["sort", "--locale", "sv"],
            input="zebra\nöl\napple\n".encode(),
            obj=cli_obj,
        )

        assert result.stdout.splitlines() == ["apple", "zebra", "öl"]

    def test_sorts_file(self, runner, cli_obj, tmp_path: Path) -> None:
        """SOURCE may be a file path."""
        source = tmp_path / "words.txt"
        source.write_text("hrad\nchata\ncz\n", encoding="utf-8")

        result = runner.invoke(main, ["sort", "-l", "cs", str(source)], obj=cli_obj)

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["cz", "hrad", "chata"]

    def test_reverse(self, runner, cli_obj) -> None:
        """--reverse sorts descending."""
        result = runner.invoke(
            main, ["sort", "-r"], input=b"b\nc\na\n", obj=cli_obj
        )

        assert result.stdout.splitlines() == ["c", "b", "a"]

    def test_stable_for_equal_lines(self, runner, cli_obj) -> None:
        """Lines equal under case folding keep their input order."""
        result = runner.invoke(
            main,
            ["sort", "--ignore-case"],
            input=b"b\nA\na\nB\n",
            obj=cli_obj,
        )

        assert result.stdout.splitlines() == ["A", "a", "b", "B"]

    def test_unique(self, runner, cli_obj) -> None:
        """--unique keeps the first of each group of equal lines."""
        result = runner.invoke(
            main,
            ["sort", "--ignore-case", "--unique"],
            input=b"b\nA\na\nB\n",
            obj=cli_obj,
        )

        assert result.stdout.splitlines() == ["A", "b"]

    def test_unique_reverse(self, runner, cli_obj) -> None:
        """--unique with --reverse lists the kept lines descending."""
        result = runner.invoke(
            main,
            ["sort", "-u", "-r", "--ignore-case"],
            input=b"b\nA\na\nB\n",
            obj=cli_obj,
        )

        assert result.stdout.splitlines() == ["b", "A"]

    def test_empty_input(self, runner, cli_obj) -> None:
        """Empty input sorts to no output."""
        result = runner.invoke(main, ["sort"], input=b"", obj=cli_obj)

        assert result.exit_code == 0
        assert result.stdout == ""

    def test_json_output(self, runner, cli_obj) -> None:
        """JSON output includes the sorted lines and options."""
        result = runner.invoke(
            main,
            ["sort", "--locale", "sv", "--format", "json"],
            input="öl\napple\n".encode(),
            obj=cli_obj,
        )

        data = json.loads(result.stdout)
        assert data == {
            "locale": "sv",
            "ignore_case": False,
            "reverse": False,
            "unique": False,
            "lines": ["apple", "öl"],
        }

    def test_undecodable_input(self, runner, cli_obj) -> None:
        """Input that does not decode exits with code 10."""
        result = runner.invoke(main, ["sort"], input=b"\xff\n", obj=cli_obj)

        assert result.exit_code == 10
        assert "Error:" in result.stderr

    def test_unknown_locale(self, runner, cli_obj) -> None:
        """Unknown locales exit with code 12 before reading input."""
        result = runner.invoke(
            main, ["sort", "--locale", "xx"], input=b"a\n", obj=cli_obj
        )

        assert result.exit_code == 12
