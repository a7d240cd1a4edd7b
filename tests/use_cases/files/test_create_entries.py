"""
Tests for the file and directory creation use cases.
"""

import os
from unittest.mock import MagicMock

import pytest

from file_explorer.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_explorer.entities.session import Session
from file_explorer.exceptions import EntryExistsError, FileRepositoryError
from file_explorer.ports.files.file_repository_port import FileRepositoryPort
from file_explorer.use_cases.files.create_entries import (
    CreateDirectoryUseCase,
    CreateFileUseCase,
)


class TestCreateFileUseCase:
    """Test cases for the CreateFileUseCase."""

    def test_execute_creates_empty_file(self, empty_directory):
        use_case = CreateFileUseCase(LocalFileSystemAdapter())

        path = use_case.execute(Session(empty_directory), "a.txt")

        assert path == os.path.join(empty_directory, "a.txt")
        assert os.path.getsize(path) == 0

    def test_execute_existing_name(self, temp_directory):
        """Test that an existing file is left untouched."""
        use_case = CreateFileUseCase(LocalFileSystemAdapter())

        with pytest.raises(EntryExistsError, match="File already exists: test1.txt"):
            use_case.execute(Session(temp_directory), "test1.txt")
        assert os.path.getsize(os.path.join(temp_directory, "test1.txt")) == 20

    def test_execute_existing_directory_name(self, temp_directory):
        use_case = CreateFileUseCase(LocalFileSystemAdapter())
        with pytest.raises(EntryExistsError, match="File already exists: subdir"):
            use_case.execute(Session(temp_directory), "subdir")

    def test_execute_failure(self, mock_logger):
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.exists.return_value = False
        mock_repository.create_file.side_effect = FileRepositoryError("denied")

        use_case = CreateFileUseCase(mock_repository, mock_logger)

        with pytest.raises(FileRepositoryError, match="^Failed to create file: x$"):
            use_case.execute(Session("/work"), "x")
        mock_logger.warning.assert_called_once_with("denied")


class TestCreateDirectoryUseCase:
    """Test cases for the CreateDirectoryUseCase."""

    def test_execute_creates_directory(self, empty_directory):
        use_case = CreateDirectoryUseCase(LocalFileSystemAdapter())

        path = use_case.execute(Session(empty_directory), "d")

        assert os.path.isdir(path)

    def test_execute_existing_name(self, temp_directory):
        use_case = CreateDirectoryUseCase(LocalFileSystemAdapter())
        with pytest.raises(EntryExistsError, match="Directory already exists: subdir"):
            use_case.execute(Session(temp_directory), "subdir")

    def test_execute_missing_parent(self, empty_directory):
        """Test that parent directories are not created."""
        use_case = CreateDirectoryUseCase(LocalFileSystemAdapter())

        with pytest.raises(FileRepositoryError, match="Failed to create directory: a/b"):
            use_case.execute(Session(empty_directory), "a/b")
        assert not os.path.exists(os.path.join(empty_directory, "a"))
