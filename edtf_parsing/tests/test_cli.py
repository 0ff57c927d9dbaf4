"""Tests for the edtf command line."""

import json

import pytest

from edtf_parsing.cli import main


class TestCli:
    """Subcommands and exit codes."""

    def test_normalize(self, capsys):
        assert main(["normalize", "(2011)-06-04~"]) == 0
        assert capsys.readouterr().out.strip() == "2011-(06-04)~"

    def test_normalize_invalid(self, capsys):
        assert main(["normalize", "2004-13-"]) == 1
        assert "Invalid EDTF value" in capsys.readouterr().err

    def test_parse_json(self, capsys):
        assert main(["parse", "1984?/2004~", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["edtf"] == "1984?/2004~"
        assert data["items"][0]["start"]["year"]["is_uncertain"] is True

    def test_parse_summary(self, capsys):
        assert main(["parse", "2004-(06)?-11"]) == 0
        out = capsys.readouterr().out
        assert "item 0: date" in out
        assert "precision: day" in out
        assert "qualified: month" in out

    def test_parse_summary_interval(self, capsys):
        assert main(["parse", "1984-06-02?/unknown"]) == 0
        out = capsys.readouterr().out
        assert "item 0: interval" in out
        assert "end: unknown" in out

    def test_validate_mixed(self, capsys):
        assert main(["validate", "1984?", "nope", "[1667, 1668]"]) == 1
        lines = capsys.readouterr().out.splitlines()
        assert lines == ["OK\t1984?", "INVALID\tnope", "OK\t[1667, 1668]"]

    def test_validate_all_ok(self, capsys):
        assert main(["validate", "2001-21", "1670..1672"]) == 0

    def test_requires_subcommand(self):
        with pytest.raises(SystemExit):
            main([])
