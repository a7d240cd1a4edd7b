"""
Local file system adapter implementation for file operations.
"""

import errno
import logging
import os
import shutil
from typing import Iterator, Optional

from typing_extensions import override

from file_explorer.entities.directory_entry import DirectoryEntry
from file_explorer.entities.entry_details import EntryDetails
from file_explorer.entities.search_result import SearchResult
from file_explorer.exceptions import EntryNotFoundError, FileRepositoryError
from file_explorer.ports.files.file_repository_port import FileRepositoryPort


class LocalFileSystemAdapter(FileRepositoryPort):
    """Local file system implementation of the file repository port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _validate_directory(self, directory: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Args:
            directory: Path to the directory to validate

        Raises:
            FileRepositoryError: If directory does not exist or is not a directory
        """
        if not os.path.exists(directory):
            raise FileRepositoryError(f"Directory does not exist: {directory}")

        if not os.path.isdir(directory):
            raise FileRepositoryError(f"Path is not a directory: {directory}")

    def iter_tree(self, root: str) -> Iterator[os.DirEntry]:
        """
        Walk every entry below root, depth first and in pre-order.

        A directory is yielded before its children. Directories that cannot
        be opened are yielded but not descended into, and symlinked
        directories are never followed. The root itself is not yielded.

        Args:
            root: Directory to walk

        Yields:
            os.DirEntry objects for each descendant
        """
        try:
            top = os.scandir(root)
        except OSError as e:
            self._logger.warning(f"Cannot open directory {root}: {e}")
            return

        stack = [top]
        try:
            while stack:
                try:
                    entry = next(stack[-1])
                except StopIteration:
                    stack.pop().close()
                    continue
                except OSError as e:
                    self._logger.debug(f"Stopped reading a directory below {root}: {e}")
                    stack.pop().close()
                    continue

                yield entry

                try:
                    descend = entry.is_dir(follow_symlinks=False)
                except OSError:
                    descend = False
                if not descend:
                    continue
                try:
                    stack.append(os.scandir(entry.path))
                except OSError as e:
                    self._logger.debug(f"Skipping unreadable directory {entry.path}: {e}")
        finally:
            for it in stack:
                it.close()

    def _entry_size(self, entry: os.DirEntry) -> Optional[int]:
        try:
            return entry.stat().st_size
        except OSError as e:
            self._logger.debug(f"Cannot read size of {entry.path}: {e}")
            return None

    def _entry_mtime(self, entry: os.DirEntry) -> Optional[int]:
        try:
            return int(entry.stat().st_mtime)
        except OSError as e:
            self._logger.debug(f"Cannot read modification time of {entry.path}: {e}")
            return None

    def _create_directory_entry(
        self, entry: os.DirEntry, compute_directory_sizes: bool
    ) -> Optional[DirectoryEntry]:
        """
        Create a DirectoryEntry from an os.DirEntry.

        Returns:
            The entity, or None when the entry type cannot be determined
        """
        try:
            is_dir = entry.is_dir()
            is_file = not is_dir and entry.is_file()
        except OSError as e:
            self._logger.debug(f"Skipping entry {entry.path}: {e}")
            return None

        size: Optional[int] = None
        is_empty_dir = False
        if is_dir and compute_directory_sizes:
            size = self.total_regular_file_size(entry.path)
            is_empty_dir = self.is_empty_directory(entry.path)
        elif is_file:
            size = self._entry_size(entry)

        return DirectoryEntry(
            name=entry.name + ("/" if is_dir else ""),
            is_dir=is_dir,
            size_bytes=size,
            modified_at=self._entry_mtime(entry),
            is_empty_dir=is_empty_dir,
        )

    @override
    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    @override
    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    @override
    def is_regular_file(self, path: str) -> bool:
        return os.path.isfile(path)

    @override
    def can_enter_directory(self, path: str) -> bool:
        return os.path.isdir(path) and os.access(path, os.X_OK)

    @override
    def is_symlink(self, path: str) -> bool:
        return os.path.islink(path)

    @override
    def is_empty_directory(self, path: str) -> bool:
        try:
            with os.scandir(path) as it:
                return next(it, None) is None
        except OSError:
            return False

    @override
    def list_entries(
        self, directory: str, compute_directory_sizes: bool = False
    ) -> list[DirectoryEntry]:
        """
        List the immediate children of a directory.

        Args:
            directory: Path to the directory to list
            compute_directory_sizes: Whether to compute recursive directory sizes

        Returns:
            List of DirectoryEntry entities

        Raises:
            FileRepositoryError: If listing fails
        """
        self._validate_directory(directory)
        try:
            with os.scandir(directory) as it:
                raw_entries = list(it)
        except OSError as e:
            raise FileRepositoryError(f"Failed to list entries in {directory}: {str(e)}")

        entries: list[DirectoryEntry] = []
        for raw in raw_entries:
            entry = self._create_directory_entry(raw, compute_directory_sizes)
            if entry is not None:
                entries.append(entry)
        return entries

    @override
    def total_regular_file_size(self, root: str) -> int:
        total = 0
        for entry in self.iter_tree(root):
            try:
                if not entry.is_file():
                    continue
                total += entry.stat().st_size
            except OSError as e:
                self._logger.debug(f"Not counting {entry.path}: {e}")
        return total

    @override
    def search_entries(self, root: str, keyword: str) -> list[SearchResult]:
        """
        Find entries below root whose base name contains keyword, ignoring case.

        Args:
            root: Directory to search in
            keyword: Substring to look for in base names

        Returns:
            List of SearchResult entities in traversal order

        Raises:
            FileRepositoryError: If root is not a directory
        """
        self._validate_directory(root)
        needle = keyword.casefold()
        results: list[SearchResult] = []
        for entry in self.iter_tree(root):
            if needle not in entry.name.casefold():
                continue
            try:
                is_dir = entry.is_dir()
            except OSError:
                is_dir = False
            results.append(SearchResult.from_path(entry.path, is_dir))
        return results

    @override
    def stat_entry(self, path: str) -> EntryDetails:
        try:
            st = os.stat(path)
        except FileNotFoundError:
            raise EntryNotFoundError(f"Entry does not exist: {path}")
        except OSError as e:
            raise FileRepositoryError(f"Failed to stat {path}: {str(e)}")
        return EntryDetails.from_stat(path, st, os.path.isdir(path))

    @override
    def create_file(self, path: str) -> None:
        try:
            with open(path, "xb"):
                pass
        except OSError as e:
            raise FileRepositoryError(f"Failed to create file {path}: {str(e)}")

    @override
    def create_directory(self, path: str) -> None:
        try:
            os.mkdir(path)
        except OSError as e:
            raise FileRepositoryError(f"Failed to create directory {path}: {str(e)}")

    @override
    def remove_file(self, path: str) -> None:
        try:
            os.remove(path)
        except OSError as e:
            raise FileRepositoryError(f"Failed to delete file {path}: {str(e)}")

    @override
    def remove_directory(self, path: str) -> None:
        try:
            os.rmdir(path)
        except OSError as e:
            raise FileRepositoryError(f"Failed to delete directory {path}: {str(e)}")

    @override
    def copy_file(self, source: str, destination: str) -> None:
        try:
            shutil.copy(source, destination)
        except OSError as e:
            raise FileRepositoryError(
                f"Failed to copy {source} to {destination}: {str(e)}"
            )

    @override
    def move_entry(self, source: str, destination: str) -> None:
        try:
            os.rename(source, destination)
            return
        except OSError as e:
            if e.errno != errno.EXDEV:
                raise FileRepositoryError(
                    f"Failed to move {source} to {destination}: {str(e)}"
                )
        # Different filesystems: copy then delete
        self._logger.info(f"Moving {source} across filesystems to {destination}")
        try:
            shutil.move(source, destination)
        except OSError as e:
            raise FileRepositoryError(
                f"Failed to move {source} to {destination}: {str(e)}"
            )
