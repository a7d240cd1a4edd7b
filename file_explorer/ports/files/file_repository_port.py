"""
File repository port interface defining the contract for file operations.
"""

from abc import ABC, abstractmethod

from file_explorer.entities.directory_entry import DirectoryEntry
from file_explorer.entities.entry_details import EntryDetails
from file_explorer.entities.search_result import SearchResult


class FileRepositoryPort(ABC):
    """Port interface for file repository operations."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if anything exists at path (symlinks followed)."""
        pass

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """Return True if path is a directory (symlinks followed)."""
        pass

    @abstractmethod
    def is_regular_file(self, path: str) -> bool:
        """Return True if path is a regular file (symlinks followed)."""
        pass

    @abstractmethod
    def can_enter_directory(self, path: str) -> bool:
        """Return True if path is a directory the process may use as its working directory."""
        pass

    @abstractmethod
    def is_symlink(self, path: str) -> bool:
        """Return True if path is a symbolic link, broken or not."""
        pass

    @abstractmethod
    def is_empty_directory(self, path: str) -> bool:
        """Return True if path is a readable directory with no children."""
        pass

    @abstractmethod
    def list_entries(
        self, directory: str, compute_directory_sizes: bool = False
    ) -> list[DirectoryEntry]:
        """
        List the immediate children of a directory.

        Args:
            directory: Path to the directory to list
            compute_directory_sizes: Whether to compute recursive sizes for
                subdirectories. When False their size is reported as unknown.

        Returns:
            List of DirectoryEntry entities in enumeration order

        Raises:
            FileRepositoryError: If the directory cannot be opened
        """
        pass

    @abstractmethod
    def total_regular_file_size(self, root: str) -> int:
        """
        Sum the sizes of all regular files below root, at any depth.

        Unreadable entries contribute zero; this method never raises.

        Args:
            root: Directory whose subtree is measured

        Returns:
            Total size in bytes
        """
        pass

    @abstractmethod
    def search_entries(self, root: str, keyword: str) -> list[SearchResult]:
        """
        Find entries below root whose base name contains keyword, ignoring case.

        Args:
            root: Directory whose subtree is searched
            keyword: Substring to look for

        Returns:
            Matching entries in traversal order

        Raises:
            FileRepositoryError: If root cannot be opened
        """
        pass

    @abstractmethod
    def stat_entry(self, path: str) -> EntryDetails:
        """
        Read metadata of a file or directory.

        Raises:
            FileRepositoryError: If the entry cannot be stat'ed
        """
        pass

    @abstractmethod
    def create_file(self, path: str) -> None:
        """
        Create an empty file. Fails if something already exists at path.

        Raises:
            FileRepositoryError: If the file cannot be created
        """
        pass

    @abstractmethod
    def create_directory(self, path: str) -> None:
        """
        Create a single directory.

        Raises:
            FileRepositoryError: If the directory cannot be created
        """
        pass

    @abstractmethod
    def remove_file(self, path: str) -> None:
        """
        Delete a file.

        Raises:
            FileRepositoryError: If the file cannot be deleted
        """
        pass

    @abstractmethod
    def remove_directory(self, path: str) -> None:
        """
        Delete an empty directory.

        Raises:
            FileRepositoryError: If the directory cannot be deleted
        """
        pass

    @abstractmethod
    def copy_file(self, source: str, destination: str) -> None:
        """
        Copy file content and permission bits, replacing any existing destination.

        Raises:
            FileRepositoryError: If the copy fails
        """
        pass

    @abstractmethod
    def move_entry(self, source: str, destination: str) -> None:
        """
        Rename a file or directory, copying then deleting across filesystems.

        Raises:
            FileRepositoryError: If the move fails
        """
        pass
