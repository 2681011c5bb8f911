"""CLI tests for the textrules command line."""

import io

import pytest

from textrules.cli import main
from textrules.rewrite.rules import WRONG_FILE_MESSAGE


class TestCheckCommands:
    def test_regex_argument(self, capsys):
        main(["regex", "123qwe @Regex [0-9]+"])
        assert capsys.readouterr().out == "match succeeded\n"

    def test_regex_invalid_pattern(self, capsys):
        main(["regex", "abc @Regex [0-9"])
        assert capsys.readouterr().out == "invalid pattern\n"

    def test_alnum_argument(self, capsys):
        main(["alnum", "123-abc"])
        assert capsys.readouterr().out == "is not alphanumeric\n"

    def test_regex_from_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("123 @Regex \\d+\n"))
        main(["regex"])
        assert capsys.readouterr().out == "match succeeded\n"

    def test_alnum_from_file(self, capsys, tmp_path):
        path = tmp_path / "selection.txt"
        path.write_text("123abc")

        main(["alnum", "-f", str(path)])
        assert capsys.readouterr().out == "is alphanumeric\n"

    def test_missing_file(self, capsys, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["alnum", "-f", str(tmp_path / "missing.txt")])

        assert exc.value.code == 1
        assert "Error: File not found" in capsys.readouterr().err


class TestWrapCommand:
    def test_wraps_line(self, capsys):
        main(["wrap", "obj.Method();"])
        assert capsys.readouterr().out == "var aaa = obj.Method();\n"

    def test_unchanged_line_on_no_op(self, capsys):
        main(["wrap", "if (x) { y(); }"])
        assert capsys.readouterr().out == "if (x) { y(); }\n"

    def test_wraps_stdin_line(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("    new Foo().Bar();\n"))
        main(["wrap"])
        assert capsys.readouterr().out == "var aaa = new Foo().Bar();\n"

    def test_wrong_file_name(self, capsys):
        main(["wrap", "obj.Method();", "--file-name", "notes.txt"])
        assert capsys.readouterr().out == f"{WRONG_FILE_MESSAGE}\n"


class TestMisc:
    def test_version(self, capsys):
        main(["version"])
        assert capsys.readouterr().out.startswith("textrules version ")

    def test_no_command_prints_help(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main([])

        assert exc.value.code == 0
        assert "usage: textrules" in capsys.readouterr().out
