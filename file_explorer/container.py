"""
Dependency injection container for managing application dependencies.
"""

import logging

from file_explorer.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_explorer.ports.files.file_repository_port import FileRepositoryPort
from file_explorer.use_cases.commands.entry_commands import (
    CopyCommand,
    MakeDirectoryCommand,
    MoveCommand,
    RemoveDirectoryCommand,
    RemoveFileCommand,
    TouchCommand,
)
from file_explorer.use_cases.commands.inspection_commands import (
    ChangeDirectoryCommand,
    DiskUsageCommand,
    ListCommand,
    SearchCommand,
    StatCommand,
)
from file_explorer.use_cases.commands.registry import (
    CommandRegistry,
    ExitCommand,
    HelpCommand,
)
from file_explorer.use_cases.files.change_directory import ChangeDirectoryUseCase
from file_explorer.use_cases.files.create_entries import (
    CreateDirectoryUseCase,
    CreateFileUseCase,
)
from file_explorer.use_cases.files.delete_entries import (
    DeleteDirectoryUseCase,
    DeleteFileUseCase,
)
from file_explorer.use_cases.files.describe_entry import DescribeEntryUseCase
from file_explorer.use_cases.files.disk_usage import DiskUsageUseCase
from file_explorer.use_cases.files.list_directory import ListDirectoryUseCase
from file_explorer.use_cases.files.search_entries import SearchEntriesUseCase
from file_explorer.use_cases.files.transfer_entries import (
    CopyFileUseCase,
    MoveEntryUseCase,
)


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def _use_case(self, key: str, factory):
        if key not in self._instances:
            self._instances[key] = factory(self.get_file_repository(), self._logger)
        return self._instances[key]

    def get_file_repository(self) -> FileRepositoryPort:
        """
        Get file repository adapter instance.

        Returns:
            FileRepositoryPort implementation
        """
        if "file_repository" not in self._instances:
            self._instances["file_repository"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_repository"]

    def get_list_directory_use_case(self) -> ListDirectoryUseCase:
        return self._use_case("list_directory_use_case", ListDirectoryUseCase)

    def get_search_entries_use_case(self) -> SearchEntriesUseCase:
        return self._use_case("search_entries_use_case", SearchEntriesUseCase)

    def get_disk_usage_use_case(self) -> DiskUsageUseCase:
        return self._use_case("disk_usage_use_case", DiskUsageUseCase)

    def get_describe_entry_use_case(self) -> DescribeEntryUseCase:
        return self._use_case("describe_entry_use_case", DescribeEntryUseCase)

    def get_change_directory_use_case(self) -> ChangeDirectoryUseCase:
        return self._use_case("change_directory_use_case", ChangeDirectoryUseCase)

    def get_create_file_use_case(self) -> CreateFileUseCase:
        return self._use_case("create_file_use_case", CreateFileUseCase)

    def get_create_directory_use_case(self) -> CreateDirectoryUseCase:
        return self._use_case("create_directory_use_case", CreateDirectoryUseCase)

    def get_delete_file_use_case(self) -> DeleteFileUseCase:
        return self._use_case("delete_file_use_case", DeleteFileUseCase)

    def get_delete_directory_use_case(self) -> DeleteDirectoryUseCase:
        return self._use_case("delete_directory_use_case", DeleteDirectoryUseCase)

    def get_copy_file_use_case(self) -> CopyFileUseCase:
        return self._use_case("copy_file_use_case", CopyFileUseCase)

    def get_move_entry_use_case(self) -> MoveEntryUseCase:
        return self._use_case("move_entry_use_case", MoveEntryUseCase)

    def get_command_registry(self) -> CommandRegistry:
        """
        Registry of every shell command, wired to its use case.

        Returns:
            Configured CommandRegistry, in the order shown by 'help'
        """
        if "command_registry" not in self._instances:
            logger = self._logger
            registry = CommandRegistry(
                ChangeDirectoryCommand(self.get_change_directory_use_case(), logger),
                ListCommand(self.get_list_directory_use_case(), logger),
                TouchCommand(self.get_create_file_use_case(), logger),
                MakeDirectoryCommand(self.get_create_directory_use_case(), logger),
                RemoveFileCommand(self.get_delete_file_use_case(), logger),
                RemoveDirectoryCommand(self.get_delete_directory_use_case(), logger),
                StatCommand(self.get_describe_entry_use_case(), logger),
                SearchCommand(self.get_search_entries_use_case(), logger),
                CopyCommand(self.get_copy_file_use_case(), logger),
                MoveCommand(self.get_move_entry_use_case(), logger),
                DiskUsageCommand(self.get_disk_usage_use_case(), logger),
                logger=logger,
            )
            registry.register(HelpCommand(registry))
            registry.register(ExitCommand())
            self._instances["command_registry"] = registry
        return self._instances["command_registry"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
