"""
Commands that change the filesystem: touch, mkdir, rm, rmdir, cp and mv.
"""

import logging
from typing import Optional

from typing_extensions import override

from file_explorer.entities.session import Session
from file_explorer.ports.commands.command_port import CommandOutcome, CommandSpec
from file_explorer.use_cases.commands.base import UseCaseCommand
from file_explorer.use_cases.files.create_entries import (
    CreateDirectoryUseCase,
    CreateFileUseCase,
)
from file_explorer.use_cases.files.delete_entries import (
    DeleteDirectoryUseCase,
    DeleteFileUseCase,
)
from file_explorer.use_cases.files.transfer_entries import (
    INVALID_TARGET,
    CopyFileUseCase,
    MoveEntryUseCase,
)


class TouchCommand(UseCaseCommand):
    SPEC: CommandSpec = {
        "name": "touch",
        "usage": "touch [file]",
        "description": "Create an empty file",
    }

    def __init__(self, create_file_uc: CreateFileUseCase, logger: Optional[logging.Logger] = None):
        super().__init__(logger)
        self._create_file_uc = create_file_uc

    @override
    def run(self, args: list[str], session: Session) -> CommandOutcome:
        if not args:
            return CommandOutcome.error("Missing filename: Please enter 'touch [name]'")
        self._create_file_uc.execute(session, args[0])
        return CommandOutcome()


class MakeDirectoryCommand(UseCaseCommand):
    SPEC: CommandSpec = {
        "name": "mkdir",
        "usage": "mkdir [dir]",
        "description": "Create an empty directory",
    }

    def __init__(
        self, create_directory_uc: CreateDirectoryUseCase, logger: Optional[logging.Logger] = None
    ):
        super().__init__(logger)
        self._create_directory_uc = create_directory_uc

    @override
    def run(self, args: list[str], session: Session) -> CommandOutcome:
        if not args:
            return CommandOutcome.error(
                "Missing directory name: Please enter 'mkdir [name]'"
            )
        self._create_directory_uc.execute(session, args[0])
        return CommandOutcome()


class RemoveFileCommand(UseCaseCommand):
    SPEC: CommandSpec = {
        "name": "rm",
        "usage": "rm [file]",
        "description": "Delete a file (with confirmation)",
    }

    def __init__(self, delete_file_uc: DeleteFileUseCase, logger: Optional[logging.Logger] = None):
        super().__init__(logger)
        self._delete_file_uc = delete_file_uc

    @override
    def run(self, args: list[str], session: Session) -> CommandOutcome:
        if not args:
            return CommandOutcome.error("Missing filename: Please enter 'rm [name]'")
        self._delete_file_uc.execute(session, args[0])
        return CommandOutcome()


class RemoveDirectoryCommand(UseCaseCommand):
    SPEC: CommandSpec = {
        "name": "rmdir",
        "usage": "rmdir [dir]",
        "description": "Delete an empty directory",
    }

    def __init__(
        self, delete_directory_uc: DeleteDirectoryUseCase, logger: Optional[logging.Logger] = None
    ):
        super().__init__(logger)
        self._delete_directory_uc = delete_directory_uc

    @override
    def run(self, args: list[str], session: Session) -> CommandOutcome:
        if not args:
            return CommandOutcome.error(
                "Missing directory name: Please enter 'rmdir [name]'"
            )
        self._delete_directory_uc.execute(session, args[0])
        return CommandOutcome()


class CopyCommand(UseCaseCommand):
    SPEC: CommandSpec = {
        "name": "cp",
        "usage": "cp [src] [dst]",
        "description": "Copy a file",
    }

    def __init__(self, copy_file_uc: CopyFileUseCase, logger: Optional[logging.Logger] = None):
        super().__init__(logger)
        self._copy_file_uc = copy_file_uc

    @override
    def run(self, args: list[str], session: Session) -> CommandOutcome:
        if len(args) < 2:
            return CommandOutcome.error(INVALID_TARGET)
        self._copy_file_uc.execute(session, args[0], args[1])
        return CommandOutcome()


class MoveCommand(UseCaseCommand):
    SPEC: CommandSpec = {
        "name": "mv",
        "usage": "mv [src] [dst]",
        "description": "Move/rename a file or directory",
    }

    def __init__(self, move_entry_uc: MoveEntryUseCase, logger: Optional[logging.Logger] = None):
        super().__init__(logger)
        self._move_entry_uc = move_entry_uc

    @override
    def run(self, args: list[str], session: Session) -> CommandOutcome:
        if len(args) < 2:
            return CommandOutcome.error(INVALID_TARGET)
        self._move_entry_uc.execute(session, args[0], args[1])
        return CommandOutcome()
