"""
Unit tests for the command-line interface.
"""

import json

import pytest
from minic import __version__
from minic.cli import create_parser, main


class TestCliParser:
    """Tests for argument parsing."""

    def test_lex_defaults(self):
        args = create_parser().parse_args(["lex"])
        assert args.command == "lex"
        assert args.input is None
        assert not args.compact
        assert not args.quiet

    def test_command_required(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args([])


class TestCliLex:
    """Tests for the lex command."""

    def test_lex_file(self, sample_c_file, capsys):
        exit_code = main(["lex", str(sample_c_file)])
        captured = capsys.readouterr()

        assert exit_code == 0
        assert json.loads(captured.out) == {
            "Success": [
                "KwInt", {"Identifier": "main"}, "OpenParen", "KwVoid",
                "CloseParen", "OpenBrace", "KwReturn", {"Constant": 42},
                "Semicolon", "CloseBrace",
            ]
        }
        assert "--- Source Code ---" in captured.err
        assert "return 42;" in captured.err

    def test_default_source(self, capsys):
        exit_code = main(["lex"])
        captured = capsys.readouterr()

        assert exit_code == 0
        assert "No source file provided. Use default example code." in captured.err
        assert json.loads(captured.out)["Success"][:2] == ["KwInt", {"Identifier": "main"}]

    def test_lexer_error(self, temp_dir, capsys):
        path = temp_dir / "bad.c"
        path.write_text("int main() {\n  return 123bar;\n}\n", encoding="utf-8")

        exit_code = main(["lex", str(path), "--quiet"])
        captured = capsys.readouterr()

        assert exit_code == 1
        assert json.loads(captured.out) == {
            "Error": {"unexpected_character": {"char": "1", "pos": 22}}
        }
        assert "Line 2, col 10" in captured.err
        assert "--- Source Code ---" not in captured.err

    def test_missing_file(self, temp_dir, capsys):
        exit_code = main(["lex", str(temp_dir / "nope.c")])
        captured = capsys.readouterr()

        assert exit_code == 1
        assert captured.out == ""
        assert "Input file not found" in captured.err

    def test_compact_output(self, sample_c_file, capsys):
        main(["lex", str(sample_c_file), "--compact", "-q"])
        captured = capsys.readouterr()
        assert captured.out.count("\n") == 1
        assert captured.err == ""

    def test_verbose(self, sample_c_file, capsys):
        assert main(["lex", str(sample_c_file), "-v", "-q"]) == 0


class TestCliVersion:
    """Tests for the version command."""

    def test_version(self, capsys):
        assert main(["version"]) == 0
        assert f"minic version {__version__}" in capsys.readouterr().out
