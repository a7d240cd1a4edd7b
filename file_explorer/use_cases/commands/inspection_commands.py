"""
Commands that look at the filesystem: cd, ls, search, stat and du.
"""

import logging
from typing import Optional

from typing_extensions import override

from file_explorer.entities.directory_entry import ListingMode
from file_explorer.entities.session import Session
from file_explorer.exceptions import FileRepositoryError
from file_explorer.ports.commands.command_port import CommandOutcome, CommandSpec
from file_explorer.use_cases.commands.base import UseCaseCommand
from file_explorer.use_cases.files.change_directory import ChangeDirectoryUseCase
from file_explorer.use_cases.files.describe_entry import DescribeEntryUseCase
from file_explorer.use_cases.files.disk_usage import DiskUsageUseCase
from file_explorer.use_cases.files.list_directory import ListDirectoryUseCase
from file_explorer.use_cases.files.search_entries import SearchEntriesUseCase
from file_explorer.utils.formatting import format_listing

CWD_UNAVAILABLE = "Failed to access current directory"


class ChangeDirectoryCommand(UseCaseCommand):
    SPEC: CommandSpec = {
        "name": "cd",
        "usage": "cd [path]",
        "description": "Switch to target directory ('cd ~' for home)",
    }

    def __init__(
        self, change_directory_uc: ChangeDirectoryUseCase, logger: Optional[logging.Logger] = None
    ):
        super().__init__(logger)
        self._change_directory_uc = change_directory_uc

    @override
    def run(self, args: list[str], session: Session) -> CommandOutcome:
        if not args:
            return CommandOutcome.error("Missing path: Please enter 'cd [path]'")
        self._change_directory_uc.execute(session, args[0])
        return CommandOutcome()


class ListCommand(UseCaseCommand):
    SPEC: CommandSpec = {
        "name": "ls",
        "usage": "ls [-s|-t]",
        "description": "List entries; -s sorts by size (desc), -t by modify time (desc)",
    }

    def __init__(
        self, list_directory_uc: ListDirectoryUseCase, logger: Optional[logging.Logger] = None
    ):
        super().__init__(logger)
        self._list_directory_uc = list_directory_uc

    @override
    def run(self, args: list[str], session: Session) -> CommandOutcome:
        if len(args) > 1:
            return CommandOutcome.error(f"Invalid option: {' '.join(args)}")
        try:
            mode = ListingMode.from_option(args[0] if args else None)
        except ValueError:
            return CommandOutcome.error(f"Invalid option: {args[0]}")

        try:
            entries = self._list_directory_uc.execute(session.cwd, mode)
        except FileRepositoryError as e:
            self._logger.warning(str(e))
            return CommandOutcome.error(CWD_UNAVAILABLE)
        return CommandOutcome(lines=format_listing(entries))


class SearchCommand(UseCaseCommand):
    SPEC: CommandSpec = {
        "name": "search",
        "usage": "search [keyword]",
        "description": "Search files and directories recursively (case-insensitive)",
    }

    def __init__(
        self, search_entries_uc: SearchEntriesUseCase, logger: Optional[logging.Logger] = None
    ):
        super().__init__(logger)
        self._search_entries_uc = search_entries_uc

    @override
    def run(self, args: list[str], session: Session) -> CommandOutcome:
        if not args:
            return CommandOutcome.error("Missing keyword: Please enter 'search [keyword]'")
        keyword = args[0]

        try:
            results = self._search_entries_uc.execute(session.cwd, keyword)
        except FileRepositoryError as e:
            self._logger.warning(str(e))
            return CommandOutcome.error(CWD_UNAVAILABLE)

        if not results:
            return CommandOutcome.ok(f"No results found for '{keyword}'")
        lines = [f"Search results for '{keyword}' ({len(results)} items):"]
        lines.extend(str(r) for r in results)
        return CommandOutcome(lines=lines)


class StatCommand(UseCaseCommand):
    SPEC: CommandSpec = {
        "name": "stat",
        "usage": "stat [name]",
        "description": "Show detailed information",
    }

    def __init__(
        self, describe_entry_uc: DescribeEntryUseCase, logger: Optional[logging.Logger] = None
    ):
        super().__init__(logger)
        self._describe_entry_uc = describe_entry_uc

    @override
    def run(self, args: list[str], session: Session) -> CommandOutcome:
        if not args:
            return CommandOutcome.error("Missing target: Please enter 'stat [name]'")
        details = self._describe_entry_uc.execute(session, args[0])
        return CommandOutcome(lines=details.to_lines())


class DiskUsageCommand(UseCaseCommand):
    SPEC: CommandSpec = {
        "name": "du",
        "usage": "du [dir]",
        "description": "Calculate total directory size",
    }

    def __init__(self, disk_usage_uc: DiskUsageUseCase, logger: Optional[logging.Logger] = None):
        super().__init__(logger)
        self._disk_usage_uc = disk_usage_uc

    @override
    def run(self, args: list[str], session: Session) -> CommandOutcome:
        if not args:
            return CommandOutcome.error("Missing directory name: Please enter 'du [name]'")
        usage = self._disk_usage_uc.execute(session, args[0])
        return CommandOutcome.ok(str(usage))
