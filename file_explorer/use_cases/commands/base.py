"""
Common behaviour for commands backed by a use case.
"""

import logging
from abc import abstractmethod
from typing import Optional

from typing_extensions import override

from file_explorer.entities.session import Session
from file_explorer.exceptions import BaseAppError, UserDeclinedError
from file_explorer.ports.commands.command_port import (
    CommandOutcome,
    CommandPort,
    CommandSpec,
)


class UseCaseCommand(CommandPort):
    """
    Base class turning application errors into printed messages.

    Subclasses set ``SPEC`` and implement ``run``. A declined confirmation
    ends the command silently; any other BaseAppError becomes an error
    outcome carrying the exception message.
    """

    SPEC: CommandSpec

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    @property
    @override
    def spec(self) -> CommandSpec:
        return self.SPEC

    @override
    def execute(self, args: list[str], session: Session) -> CommandOutcome:
        try:
            return self.run(args, session)
        except UserDeclinedError as e:
            self._logger.info(str(e))
            return CommandOutcome()
        except BaseAppError as e:
            self._logger.debug(f"{self.SPEC['name']} failed: {e}")
            return CommandOutcome.error(str(e))

    @abstractmethod
    def run(self, args: list[str], session: Session) -> CommandOutcome:
        pass
