"""
Use case for reading the metadata of a single entry.
"""

import logging
from typing import Optional

from file_explorer.entities.entry_details import EntryDetails
from file_explorer.entities.session import Session
from file_explorer.exceptions import EntryNotFoundError
from file_explorer.ports.files.file_repository_port import FileRepositoryPort


class DescribeEntryUseCase:
    """Use case for reading the metadata of a single entry."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, name: str) -> EntryDetails:
        path = session.resolve(name)
        if not self._file_repository.exists(path):
            raise EntryNotFoundError(f"Target not found: {name}")
        try:
            return self._file_repository.stat_entry(path)
        except EntryNotFoundError:
            raise EntryNotFoundError(f"Target not found: {name}")
