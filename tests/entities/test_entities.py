"""
Tests for the domain entities.
"""

import os

import pytest

from file_explorer.entities.directory_entry import DirectoryEntry, ListingMode
from file_explorer.entities.entry_details import EntryDetails
from file_explorer.entities.search_result import SearchResult
from file_explorer.entities.session import Session


class TestListingMode:
    """Test cases for mapping ls options to modes."""

    @pytest.mark.parametrize(
        "option, expected",
        [
            (None, ListingMode.PLAIN),
            ("-s", ListingMode.SORT_BY_SIZE),
            ("-t", ListingMode.SORT_BY_TIME),
        ],
    )
    def test_from_option(self, option, expected):
        assert ListingMode.from_option(option) is expected

    def test_from_option_rejects_unknown(self):
        with pytest.raises(ValueError, match="Unsupported ls option: -x"):
            ListingMode.from_option("-x")


class TestDirectoryEntry:
    """Test cases for the DirectoryEntry entity."""

    def test_file_labels(self):
        entry = DirectoryEntry(name="a.txt", is_dir=False, size_bytes=42)
        assert entry.type_label == "File"
        assert entry.size_label == "42"
        assert entry.modify_time_label == "-"

    def test_directory_labels(self):
        entry = DirectoryEntry(name="docs/", is_dir=True)
        assert entry.type_label == "Dir"
        assert entry.size_label == "-"

    def test_display_name_escapes_control_characters(self):
        """Test that tabs and newlines are shown as backslash sequences."""
        entry = DirectoryEntry(name="a\tb\nc", is_dir=False)
        assert entry.display_name == "a\\tb\\nc"
        assert DirectoryEntry(name="plain name.txt", is_dir=False).display_name == (
            "plain name.txt"
        )


class TestSearchResult:
    """Test cases for the SearchResult entity."""

    def test_directory_path_gets_trailing_separator(self, tmp_path):
        result = SearchResult.from_path(str(tmp_path / "catalogue"), is_dir=True)
        assert result.absolute_path == str(tmp_path / "catalogue") + os.sep
        assert str(result) == f"{tmp_path / 'catalogue'}{os.sep} (Dir)"

    def test_file_path_is_absolute(self, tmp_path):
        result = SearchResult.from_path(str(tmp_path / "Logfile.txt"), is_dir=False)
        assert result.absolute_path == str(tmp_path / "Logfile.txt")
        assert str(result).endswith("Logfile.txt (File)")


class TestEntryDetails:
    """Test cases for the EntryDetails entity."""

    def test_file_details(self, temp_directory):
        path = os.path.join(temp_directory, "test1.txt")
        details = EntryDetails.from_stat(path, os.stat(path), is_dir=False)

        lines = details.to_lines()

        assert lines[0] == "Type: File"
        assert lines[1] == f"Path: {path}"
        assert lines[2] == "Size: 20"
        assert lines[3].startswith("Create Time: ")
        assert lines[4].startswith("Modify Time: ")
        assert lines[5].startswith("Access Time: ")

    def test_directory_size_is_dash(self, temp_directory):
        path = os.path.join(temp_directory, "subdir")
        details = EntryDetails.from_stat(path, os.stat(path), is_dir=True)
        assert details.size_bytes is None
        assert "Size: -" in details.to_lines()
        assert details.type_label == "Dir"


class TestSession:
    """Test cases for the Session entity."""

    def test_defaults_to_process_directory(self):
        assert Session().cwd == os.path.realpath(os.getcwd())

    def test_resolve_relative_and_absolute(self, temp_directory):
        session = Session(temp_directory)
        assert session.resolve("x") == os.path.join(temp_directory, "x")
        assert session.resolve("/abs/path") == "/abs/path"

    def test_change_directory_does_not_touch_process_cwd(self, temp_directory):
        before = os.getcwd()
        session = Session(temp_directory)

        session.change_directory("subdir")

        assert session.cwd == os.path.join(temp_directory, "subdir")
        assert os.getcwd() == before

    def test_change_directory_normalizes_parent(self, temp_directory):
        session = Session(os.path.join(temp_directory, "subdir"))
        session.change_directory("..")
        assert session.cwd == temp_directory

    def test_default_confirm_declines(self, temp_directory):
        assert Session(temp_directory).confirm("sure?") is False
