"""
Tests for the command line entry point.
"""

import os

import pytest

from file_explorer.cli import build_parser, main


@pytest.fixture
def no_input(monkeypatch):
    def _eof(*args):
        raise EOFError

    monkeypatch.setattr("builtins.input", _eof)


class TestMain:
    """Test cases for main."""

    def test_invalid_start_directory(self, capsys, no_input, empty_directory):
        missing = f"{empty_directory}/missing"

        assert main([missing, "--no-color"]) == 1

        assert capsys.readouterr().out == f"Directory not found: {missing}\n"

    def test_starts_in_given_directory(self, capsys, no_input, temp_directory):
        assert main([temp_directory, "--no-color"]) == 0

        out = capsys.readouterr().out
        assert out.startswith(f"Current Directory: {temp_directory}\n")

    def test_commands_from_stdin(self, capsys, monkeypatch, empty_directory):
        lines = iter(["touch created.txt", "exit"])
        monkeypatch.setattr("builtins.input", lambda *args: next(lines))

        assert main([empty_directory, "--no-color"]) == 0

        assert "File explorer closed successfully" in capsys.readouterr().out
        assert os.path.exists(os.path.join(empty_directory, "created.txt"))

    def test_invalid_log_level(self, capsys, no_input, temp_directory):
        assert main([temp_directory, "--log-level", "chatty"]) == 2
        assert "Invalid log level: chatty" in capsys.readouterr().err


class TestBuildParser:
    def test_defaults(self):
        args = build_parser().parse_args([])

        assert args.directory is None
        assert args.log_level is None
        assert args.no_color is False
