"""
Tests for home directory expansion.
"""

import os

from file_explorer.utils.paths import expand_home


class TestExpandHome:
    def test_tilde_alone(self, monkeypatch):
        monkeypatch.setenv("HOME", "/home/tester")
        assert expand_home("~") == "/home/tester"

    def test_tilde_prefix(self, monkeypatch):
        monkeypatch.setenv("HOME", "/home/tester")
        assert expand_home("~/docs") == "/home/tester/docs"

    def test_other_paths_unchanged(self, monkeypatch):
        monkeypatch.setenv("HOME", "/home/tester")
        assert expand_home("docs/~") == "docs/~"
        assert expand_home("~other") == "~other"

    def test_no_home(self, monkeypatch):
        """Test that an unresolvable home directory gives None."""
        monkeypatch.setattr(os.path, "expanduser", lambda path: path)
        assert expand_home("~") is None
        assert expand_home("~/docs") is None
        assert expand_home("plain") == "plain"
