"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class CommandParseError(BaseAppError):
    """Exception raised when a command line cannot be tokenized."""

    pass


class UnknownCommandError(BaseAppError):
    """Exception raised when no command is registered under a name."""

    def __init__(self, name: str):
        super().__init__(f"Unknown command: {name}")
        self.name = name


class UserDeclinedError(BaseAppError):
    """Exception raised when the user answers no to a confirmation prompt."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised for file repository errors."""

    pass


class EntryNotFoundError(FileRepositoryError):
    """Exception raised when a file or directory does not exist."""

    pass


class EntryExistsError(FileRepositoryError):
    """Exception raised when creating an entry that already exists."""

    pass


class WrongEntryTypeError(FileRepositoryError):
    """Exception raised when a file is given where a directory is needed, or the reverse."""

    pass


class DirectoryNotEmptyError(FileRepositoryError):
    """Exception raised when removing a directory that still has children."""

    pass


class InvalidTargetError(FileRepositoryError):
    """Exception raised when a copy or move destination cannot be used."""

    pass


class InvalidDirectoryError(FileRepositoryError):
    """Exception raised when a path expected to be a directory cannot be used as one."""

    pass
