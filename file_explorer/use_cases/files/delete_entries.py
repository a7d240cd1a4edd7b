"""
Use cases for deleting files and empty directories.
"""

import logging
from typing import Optional

from file_explorer.entities.session import Session
from file_explorer.exceptions import (
    DirectoryNotEmptyError,
    EntryNotFoundError,
    FileRepositoryError,
    UserDeclinedError,
    WrongEntryTypeError,
)
from file_explorer.ports.files.file_repository_port import FileRepositoryPort


class DeleteFileUseCase:
    """Use case for deleting a regular file after confirmation."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, name: str) -> None:
        """
        Delete a regular file once the user confirms.

        Args:
            session: Session providing the working directory and confirmation prompt
            name: File name as typed by the user

        Raises:
            EntryNotFoundError: If nothing exists under that name
            WrongEntryTypeError: If the entry is not a regular file
            UserDeclinedError: If the user does not confirm
            FileRepositoryError: If deletion fails
        """
        path = session.resolve(name)
        if not self._file_repository.exists(path):
            raise EntryNotFoundError(f"File not found: {name}")
        if not self._file_repository.is_regular_file(path):
            raise WrongEntryTypeError(f"Not a file: {name}")

        if not session.confirm(f"Are you sure to delete {name}? (y/n)"):
            raise UserDeclinedError(f"Deletion of {name} cancelled")

        try:
            self._file_repository.remove_file(path)
        except FileRepositoryError as e:
            self._logger.warning(str(e))
            raise FileRepositoryError(f"Failed to delete file: {name}") from e
        self._logger.info(f"Deleted file: {path}")


class DeleteDirectoryUseCase:
    """Use case for deleting an empty directory."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, name: str) -> None:
        """
        Delete a directory that has no children.

        A symbolic link to a directory is rejected rather than followed.

        Raises:
            EntryNotFoundError: If nothing exists under that name
            WrongEntryTypeError: If the entry is not a directory
            DirectoryNotEmptyError: If the directory has children
            FileRepositoryError: If deletion fails
        """
        path = session.resolve(name)
        if not self._file_repository.exists(path):
            raise EntryNotFoundError(f"Directory not found: {name}")
        if self._file_repository.is_symlink(path) or not self._file_repository.is_directory(
            path
        ):
            raise WrongEntryTypeError(f"Not a directory: {name}")
        if not self._file_repository.is_empty_directory(path):
            raise DirectoryNotEmptyError(f"Directory not empty: {name}")

        try:
            self._file_repository.remove_directory(path)
        except FileRepositoryError as e:
            self._logger.warning(str(e))
            raise FileRepositoryError(f"Failed to delete directory: {name}") from e
        self._logger.info(f"Deleted directory: {path}")
