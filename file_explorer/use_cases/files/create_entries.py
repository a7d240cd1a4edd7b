"""
Use cases for creating empty files and directories.
"""

import logging
from typing import Optional

from file_explorer.entities.session import Session
from file_explorer.exceptions import EntryExistsError, FileRepositoryError
from file_explorer.ports.files.file_repository_port import FileRepositoryPort


class CreateFileUseCase:
    """Use case for creating an empty file."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, name: str) -> str:
        """
        Create an empty file.

        Args:
            session: Session the name is resolved against
            name: File name as typed by the user

        Returns:
            Absolute path of the new file

        Raises:
            EntryExistsError: If something already exists under that name
            FileRepositoryError: If the file cannot be created
        """
        path = session.resolve(name)
        if self._file_repository.exists(path):
            raise EntryExistsError(f"File already exists: {name}")
        try:
            self._file_repository.create_file(path)
        except FileRepositoryError as e:
            self._logger.warning(str(e))
            raise FileRepositoryError(f"Failed to create file: {name}") from e
        self._logger.info(f"Created file: {path}")
        return path


class CreateDirectoryUseCase:
    """Use case for creating an empty directory."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, name: str) -> str:
        """
        Create a directory. Parent directories are not created.

        Raises:
            EntryExistsError: If something already exists under that name
            FileRepositoryError: If the directory cannot be created
        """
        path = session.resolve(name)
        if self._file_repository.exists(path):
            raise EntryExistsError(f"Directory already exists: {name}")
        try:
            self._file_repository.create_directory(path)
        except FileRepositoryError as e:
            self._logger.warning(str(e))
            raise FileRepositoryError(f"Failed to create directory: {name}") from e
        self._logger.info(f"Created directory: {path}")
        return path
