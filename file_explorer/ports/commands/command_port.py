"""
Port and types for shell commands, independent of how output is displayed.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TypedDict

from file_explorer.entities.session import Session


class CommandSpec(TypedDict):
    """Specification for a command that can be typed at the prompt."""

    name: str
    usage: str
    description: str


@dataclass
class CommandOutcome:
    """
    Result of running a command.

    Attributes:
        lines: Output lines, in display order
        is_error: Whether the lines describe a failure
        exit_requested: Whether the shell should stop after printing
    """

    lines: list[str] = field(default_factory=list)
    is_error: bool = False
    exit_requested: bool = False

    @classmethod
    def ok(cls, *lines: str) -> "CommandOutcome":
        return cls(lines=list(lines))

    @classmethod
    def error(cls, message: str) -> "CommandOutcome":
        return cls(lines=[message], is_error=True)


class CommandPort(ABC):
    """
    Port interface for a shell command.

    A command receives the arguments that follow its name and the current
    session, and reports what should be printed.
    """

    @property
    @abstractmethod
    def spec(self) -> CommandSpec:
        """
        Get the command specification.

        Returns:
            Name, usage line and description of the command
        """
        pass

    @abstractmethod
    def execute(self, args: list[str], session: Session) -> CommandOutcome:
        """
        Run the command.

        Args:
            args: Tokens following the command name
            session: Current session

        Returns:
            Outcome describing the output
        """
        pass
