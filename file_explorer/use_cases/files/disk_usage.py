"""
Use case for measuring the total size of a directory tree.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from file_explorer.entities.session import Session
from file_explorer.exceptions import FileRepositoryError, InvalidDirectoryError
from file_explorer.ports.files.file_repository_port import FileRepositoryPort
from file_explorer.utils.formatting import format_disk_usage


@dataclass(frozen=True)
class DiskUsage:
    name: str
    total_bytes: int

    @property
    def label(self) -> str:
        return format_disk_usage(self.total_bytes)

    def __str__(self) -> str:
        return f"Total size of {self.name}: {self.label}"


class DiskUsageUseCase:
    """Use case for measuring the total size of a directory tree."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, name: str) -> DiskUsage:
        """
        Sum the sizes of all regular files below a directory.

        Args:
            session: Session the name is resolved against
            name: Directory as typed by the user

        Returns:
            DiskUsage with the byte total

        Raises:
            InvalidDirectoryError: If name is not an existing directory
        """
        path = session.resolve(name)
        if not self._file_repository.is_directory(path):
            raise InvalidDirectoryError(f"Invalid directory: {name}")
        try:
            self._logger.info(f"Measuring disk usage of: {path}")
            total = self._file_repository.total_regular_file_size(path)
            self._logger.info(f"Disk usage of {path}: {total} bytes")
            return DiskUsage(name=name, total_bytes=total)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error measuring disk usage: {e}")
            raise FileRepositoryError(f"Failed to measure {name}: {str(e)}")
