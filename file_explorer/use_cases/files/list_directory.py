"""
Use case for listing the entries of a directory.
"""

import logging
from typing import Optional

from file_explorer.entities.directory_entry import DirectoryEntry, ListingMode
from file_explorer.exceptions import FileRepositoryError
from file_explorer.ports.files.file_repository_port import FileRepositoryPort


def _by_size(entry: DirectoryEntry) -> tuple[bool, int, str]:
    return (entry.is_empty_dir, -(entry.size_bytes or 0), entry.name)


def _by_time(entry: DirectoryEntry) -> tuple[int, str]:
    return (-(entry.modified_at or 0), entry.name)


def sort_entries(entries: list[DirectoryEntry], mode: ListingMode) -> list[DirectoryEntry]:
    """
    Order entries for display.

    PLAIN keeps enumeration order. SORT_BY_TIME is newest first, unknown times
    counting as zero. SORT_BY_SIZE puts empty directories last and is
    otherwise largest first, unknown sizes counting as zero. Both sorted
    modes break ties by ascending name.
    """
    if mode is ListingMode.SORT_BY_SIZE:
        return sorted(entries, key=_by_size)
    if mode is ListingMode.SORT_BY_TIME:
        return sorted(entries, key=_by_time)
    return list(entries)


class ListDirectoryUseCase:
    """Use case for listing the entries of a directory."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(
        self, directory: str, mode: ListingMode = ListingMode.PLAIN
    ) -> list[DirectoryEntry]:
        """
        List the entries of a directory in the requested order.

        Recursive directory sizes are only computed when sorting by size.

        Args:
            directory: Path to the directory to list
            mode: Ordering to apply

        Returns:
            List of DirectoryEntry entities

        Raises:
            FileRepositoryError: If listing fails
        """
        try:
            self._logger.info(f"Listing entries in directory: {directory} ({mode.value})")
            entries = self._file_repository.list_entries(
                directory,
                compute_directory_sizes=mode is ListingMode.SORT_BY_SIZE,
            )
            self._logger.info(f"Found {len(entries)} entries")
            return sort_entries(entries, mode)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing entries: {e}")
            raise FileRepositoryError(f"Failed to list entries in {directory}: {str(e)}")
