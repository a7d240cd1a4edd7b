"""
Use cases for copying files and moving entries.
"""

import logging
import os
from typing import Optional

from file_explorer.entities.session import Session
from file_explorer.exceptions import (
    EntryNotFoundError,
    FileRepositoryError,
    InvalidTargetError,
    UserDeclinedError,
)
from file_explorer.ports.files.file_repository_port import FileRepositoryPort

INVALID_TARGET = "Invalid target path"
SOURCE_NOT_FOUND = "Source not found"


class _TransferUseCase:
    """Shared destination handling for copy and move."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def _resolve_destination(self, session: Session, source: str, destination: str) -> str:
        """
        Work out the final destination path.

        An existing directory destination receives the source's base name.
        The parent of the final path must be an existing directory.

        Raises:
            InvalidTargetError: If the parent directory does not exist
        """
        target = session.resolve(destination)
        if self._file_repository.is_directory(target):
            target = os.path.join(target, os.path.basename(os.path.normpath(source)))
        parent = os.path.dirname(target)
        if not self._file_repository.is_directory(parent):
            raise InvalidTargetError(INVALID_TARGET)
        return target


class CopyFileUseCase(_TransferUseCase):
    """Use case for copying a regular file."""

    def execute(self, session: Session, source: str, destination: str) -> str:
        """
        Copy a regular file, asking before replacing an existing file.

        Args:
            session: Session providing the working directory and confirmation prompt
            source: Source file as typed by the user
            destination: Destination file or directory as typed by the user

        Returns:
            Absolute path of the written copy

        Raises:
            EntryNotFoundError: If the source is not an existing regular file
            InvalidTargetError: If the destination cannot be written
            UserDeclinedError: If the user refuses to overwrite
        """
        source_path = session.resolve(source)
        if not self._file_repository.is_regular_file(source_path):
            raise EntryNotFoundError(SOURCE_NOT_FOUND)

        target = self._resolve_destination(session, source_path, destination)
        if self._file_repository.is_directory(target):
            raise InvalidTargetError(INVALID_TARGET)
        if self._file_repository.exists(target):
            if not session.confirm("File exists in target: Overwrite? (y/n)"):
                raise UserDeclinedError(f"Overwrite of {target} cancelled")

        try:
            self._file_repository.copy_file(source_path, target)
        except FileRepositoryError as e:
            self._logger.warning(str(e))
            raise InvalidTargetError(INVALID_TARGET) from e
        self._logger.info(f"Copied {source_path} to {target}")
        return target


class MoveEntryUseCase(_TransferUseCase):
    """Use case for moving or renaming a file or directory."""

    def execute(self, session: Session, source: str, destination: str) -> str:
        """
        Move a file or directory. An existing destination is never replaced.

        Returns:
            Absolute path of the entry after the move

        Raises:
            EntryNotFoundError: If the source does not exist
            InvalidTargetError: If the destination exists or the move fails
        """
        source_path = session.resolve(source)
        if not self._file_repository.exists(source_path):
            raise EntryNotFoundError(SOURCE_NOT_FOUND)

        target = self._resolve_destination(session, source_path, destination)
        if self._file_repository.exists(target):
            raise InvalidTargetError(INVALID_TARGET)

        try:
            self._file_repository.move_entry(source_path, target)
        except FileRepositoryError as e:
            self._logger.warning(str(e))
            raise InvalidTargetError(INVALID_TARGET) from e
        self._logger.info(f"Moved {source_path} to {target}")
        return target
