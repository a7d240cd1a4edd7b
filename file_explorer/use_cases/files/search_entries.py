"""
Use case for searching entries by keyword below a directory.
"""

import logging
from typing import Optional

from file_explorer.entities.search_result import SearchResult
from file_explorer.exceptions import FileRepositoryError
from file_explorer.ports.files.file_repository_port import FileRepositoryPort


class SearchEntriesUseCase:
    """Use case for searching entries by keyword below a directory."""

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

    def execute(self, directory: str, keyword: str) -> list[SearchResult]:
        """
        Search every level below a directory for names containing a keyword.

        Only base names are compared, ignoring case.

        Args:
            directory: Path to the directory to search in
            keyword: Substring to look for

        Returns:
            List of SearchResult entities, empty when nothing matches

        Raises:
            FileRepositoryError: If search fails
        """
        try:
            self._logger.info(
                f"Searching for entries matching '{keyword}' in directory: {directory}"
            )
            results = self._file_repository.search_entries(directory, keyword)
            self._logger.info(f"Found {len(results)} entries matching '{keyword}'")
            return results
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error searching entries: {e}")
            raise FileRepositoryError(
                f"Failed to search entries in {directory} for {keyword}: {str(e)}"
            )
