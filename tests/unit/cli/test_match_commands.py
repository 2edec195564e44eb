"""Tests for the compare and find CLI commands."""

import json

import pytest

from loctext.cli import main


class TestCompareCommand:
    """Tests for loctext compare."""

    @pytest.mark.parametrize(
        ("args", "expected"),
        [
            (["compare", "öl", "zebra"], "less"),
            (["compare", "--locale", "sv", "öl", "zebra"], "greater"),
            (["compare", "apple", "Apple"], "less"),
            (["compare", "--ignore-case", "Apple", "apple"], "equal"),
            (["compare", "café", "cafe\u0301"], "equal"),
            (["compare", "--fixed", "café", "cafe\u0301"], "greater"),
        ],
    )
    def test_orderings(self, runner, cli_obj, args, expected) -> None:
        """Prints the three-way comparison result."""
        result = runner.invoke(main, args, obj=cli_obj)

        assert result.exit_code == 0
        assert result.stdout == expected + "\n"

    def test_ignore_case_from_config(self, runner, make_obj) -> None:
        """The configured case sensitivity applies unless overridden."""
        obj = make_obj(ignore_case=True)

        folded = runner.invoke(main, ["compare", "A", "a"], obj=obj)
        exact = runner.invoke(main, ["compare", "--match-case", "A", "a"], obj=obj)

        assert folded.stdout == "equal\n"
        assert exact.stdout == "greater\n"

    def test_json_output(self, runner, cli_obj) -> None:
        """JSON output reports mode, locale and equality."""
        result = runner.invoke(
            main,
            ["compare", "-l", "sv", "café", "cafe\u0301", "--format", "json"],
            obj=cli_obj,
        )

        data = json.loads(result.stdout)
        assert data["mode"] == "collation"
        assert data["locale"] == "sv"
        assert data["ordering"] == "equal"
        assert data["equal"] is True

    def test_fixed_json_has_no_locale(self, runner, cli_obj) -> None:
        """Fixed comparisons report no locale and no case folding."""
        result = runner.invoke(
            main,
            ["compare", "--fixed", "--ignore-case", "A", "a", "--format", "json"],
            obj=cli_obj,
        )

        data = json.loads(result.stdout)
        assert data["mode"] == "fixed"
        assert data["locale"] is None
        assert data["ignore_case"] is False
        assert data["ordering"] == "less"
        assert data["equal"] is False

    def test_unknown_locale(self, runner, cli_obj) -> None:
        """Unknown locales exit with code 12."""
        result = runner.invoke(
            main, ["compare", "--locale", "zz", "a", "b"], obj=cli_obj
        )

        assert result.exit_code == 12


class TestFindCommand:
    """Tests for loctext find."""

    def test_first_match(self, runner, cli_obj) -> None:
        """Prints start, end and matched text of the first match."""
        result = runner.invoke(main, ["find", "banana", "an"], obj=cli_obj)

        assert result.exit_code == 0
        assert result.stdout == "1 3 an\n"

    def test_all_matches(self, runner, cli_obj) -> None:
        """--all prints every non-overlapping match."""
        result = runner.invoke(main, ["find", "--all", "banana", "an"], obj=cli_obj)

        assert result.stdout.splitlines() == ["1 3 an", "3 5 an"]

    def test_ignore_case_match(self, runner, cli_obj) -> None:
        """Case-insensitive search matches across case and normalization forms."""
        result = runner.invoke(
            main,
            ["find", "--ignore-case", "Cre\u0300me brûlée", "CRÈME"],
            obj=cli_obj,
        )

        assert result.exit_code == 0
        assert result.stdout == "0 6 Cre\u0300me\n"

    def test_no_match_inside_cluster(self, runner, cli_obj) -> None:
        """A base letter does not match inside an accented cluster."""
        result = runner.invoke(main, ["find", "cafe\u0301", "e"], obj=cli_obj)

        assert result.exit_code == 20
        assert result.stdout == ""
        assert "No match." in result.stderr

    def test_fixed_matches_inside_cluster(self, runner, cli_obj) -> None:
        """Fixed search compares raw codepoints."""
        result = runner.invoke(
            main, ["find", "--fixed", "cafe\u0301", "e"], obj=cli_obj
        )

        assert result.exit_code == 0
        assert result.stdout == "3 4 e\n"

    def test_fixed_all_matches(self, runner, cli_obj) -> None:
        """Fixed search with --all reports every match."""
        result = runner.invoke(
            main, ["find", "--fixed", "--all", "aXbXc", "X"], obj=cli_obj
        )

        assert result.stdout.splitlines() == ["1 2 X", "3 4 X"]

    def test_json_output(self, runner, cli_obj) -> None:
        """JSON output lists matches with their text."""
        result = runner.invoke(
            main,
            ["find", "--all", "banana", "na", "--format", "json"],
            obj=cli_obj,
        )

        data = json.loads(result.stdout)
        assert data["mode"] == "collation"
        assert data["matches"] == [
            {"start": 2, "end": 4, "text": "na"},
            {"start": 4, "end": 6, "text": "na"},
        ]

    def test_json_no_match(self, runner, cli_obj) -> None:
        """JSON mode still prints a document, with an empty match list."""
        result = runner.invoke(
            main, ["find", "banana", "x", "--format", "json"], obj=cli_obj
        )

        assert result.exit_code == 20
        assert json.loads(result.stdout)["matches"] == []


class TestStdinOperands:
    """Tests for reading compare and find operands from stdin."""

    def test_compare_reads_stdin(self, runner, cli_obj) -> None:
        """FIRST of "-" is read from stdin."""
        result = runner.invoke(
            main,
            ["compare", "--locale", "sv", "-", "zebra"],
            input="öl\n".encode(),
            obj=cli_obj,
        )

        assert result.exit_code == 0
        assert result.stdout == "greater\n"

    def test_find_reads_haystack_from_stdin(self, runner, cli_obj) -> None:
        """HAYSTACK of "-" is read from stdin with --encoding."""
        result = runner.invoke(
            main,
            ["find", "--encoding", "latin-1", "-", "CAFÉ", "--ignore-case"],
            input=b"un caf\xe9\n",
            obj=cli_obj,
        )

        assert result.exit_code == 0
        assert result.stdout == "3 7 café\n"

    def test_undecodable_stdin_is_invalid_input(self, runner, cli_obj) -> None:
        """Bytes that do not decode exit with code 10."""
        result = runner.invoke(
            main, ["find", "-", "a"], input=b"\xff\n", obj=cli_obj
        )

        assert result.exit_code == 10

    def test_both_operands_from_stdin_is_usage_error(self, runner, cli_obj) -> None:
        """Only one operand may read stdin."""
        result = runner.invoke(
            main, ["compare", "-", "-"], input=b"a\n", obj=cli_obj
        )

        assert result.exit_code == 2
        assert "stdin" in result.stderr
