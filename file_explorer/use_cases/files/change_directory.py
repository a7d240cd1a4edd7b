"""
Use case for moving the session's working directory.
"""

import logging
from typing import Optional

from file_explorer.entities.session import Session
from file_explorer.exceptions import InvalidDirectoryError, WrongEntryTypeError
from file_explorer.ports.files.file_repository_port import FileRepositoryPort
from file_explorer.utils.paths import expand_home


class ChangeDirectoryUseCase:
    """Use case for moving the session's working directory."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, target: str) -> str:
        """
        Change the working directory.

        "~" and paths starting with "~/" are taken from the home directory.

        Args:
            session: Session whose working directory changes
            target: Path as typed by the user

        Returns:
            The new absolute working directory

        Raises:
            InvalidDirectoryError: If the target does not exist or cannot be entered
            WrongEntryTypeError: If the target is not a directory
        """
        expanded = expand_home(target)
        if not expanded:
            raise InvalidDirectoryError(f"Invalid directory: {target}")

        path = session.resolve(expanded)
        if not self._file_repository.exists(path):
            raise InvalidDirectoryError(f"Invalid directory: {target}")
        if not self._file_repository.is_directory(path):
            raise WrongEntryTypeError(f"Not a directory: {target}")
        if not self._file_repository.can_enter_directory(path):
            raise InvalidDirectoryError(f"Invalid directory: {target}")

        session.change_directory(path)
        self._logger.info(f"Working directory is now: {session.cwd}")
        return session.cwd
