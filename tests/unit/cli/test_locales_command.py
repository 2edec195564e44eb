"""Tests for the locales CLI command."""

import json

from loctext.cli import main
from loctext.normalizer import unicode_version


class TestLocalesCommand:
    """Tests for loctext locales."""

    def test_json_lists_tables(self, runner, cli_obj) -> None:
        """JSON output lists every shipped table, root first."""
        result = runner.invoke(main, ["locales", "--format", "json"], obj=cli_obj)

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["unicode_version"] == unicode_version()

        by_tag = {entry["locale"]: entry for entry in data["locales"]}
        assert data["locales"][0]["locale"] == "root"
        assert {"tr", "sv", "cs", "ja"} <= set(by_tag)
        assert by_tag["sv"]["name"] == "Swedish"
        assert by_tag["sv"]["tailored_elements"] == 3
        assert by_tag["ja"]["title_case"] is False
        assert by_tag["tr"]["title_case"] is True

    def test_human_output(self, runner, cli_obj) -> None:
        """Human output shows the Unicode version and a table."""
        result = runner.invoke(main, ["locales"], obj=cli_obj)

        lines = result.stdout.splitlines()
        assert lines[0] == f"Unicode {unicode_version()}"
        assert lines[2].split() == ["LOCALE", "NAME", "TAILORED", "TITLE"]
        assert any(line.split()[:2] == ["sv", "Swedish"] for line in lines[3:])
