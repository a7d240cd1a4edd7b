"""
Tests for the SearchEntriesUseCase.
"""

from unittest.mock import MagicMock

import pytest

from file_explorer.entities.search_result import SearchResult
from file_explorer.exceptions import FileRepositoryError
from file_explorer.ports.files.file_repository_port import FileRepositoryPort
from file_explorer.use_cases.files.search_entries import SearchEntriesUseCase


class TestSearchEntriesUseCase:
    """Test cases for the SearchEntriesUseCase."""

    def test_execute_success(self, mock_logger):
        mock_repository = MagicMock(spec=FileRepositoryPort)
        results = [SearchResult("/d/log.txt", False), SearchResult("/d/logs/", True)]
        mock_repository.search_entries.return_value = results

        use_case = SearchEntriesUseCase(mock_repository, mock_logger)

        assert use_case.execute("/d", "log") == results
        mock_repository.search_entries.assert_called_once_with("/d", "log")

    def test_execute_no_results(self, mock_logger):
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.search_entries.return_value = []

        use_case = SearchEntriesUseCase(mock_repository, mock_logger)

        assert use_case.execute("/d", "zzz") == []

    def test_execute_repository_error(self, mock_logger):
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.search_entries.side_effect = FileRepositoryError("Search failed")

        use_case = SearchEntriesUseCase(mock_repository, mock_logger)

        with pytest.raises(FileRepositoryError, match="Search failed"):
            use_case.execute("/d", "x")

    def test_execute_unexpected_error(self, mock_logger):
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.search_entries.side_effect = Exception("Unexpected error")

        use_case = SearchEntriesUseCase(mock_repository, mock_logger)

        with pytest.raises(FileRepositoryError, match="Failed to search entries"):
            use_case.execute("/d", "x")
        mock_logger.error.assert_called_once()

    def test_execute_against_real_tree(self, temp_directory):
        """Test searching the shared fixture tree through the real adapter."""
        from file_explorer.adapters.files.local_fs_adapter import LocalFileSystemAdapter

        use_case = SearchEntriesUseCase(LocalFileSystemAdapter())

        results = use_case.execute(temp_directory, "TEST3")

        assert [str(r) for r in results] == [
            f"{temp_directory}/subdir/test3.md (File)"
        ]
