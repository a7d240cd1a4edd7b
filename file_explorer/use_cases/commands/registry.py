"""
Command registry mapping command names to command objects.
"""

import logging
from typing import Optional

from typing_extensions import override

from file_explorer.entities.session import Session
from file_explorer.exceptions import UnknownCommandError
from file_explorer.ports.commands.command_port import (
    CommandOutcome,
    CommandPort,
    CommandSpec,
)

EXIT_MESSAGE = "File explorer closed successfully"


class CommandRegistry:
    """Dispatch table from command name to command, in registration order."""

    def __init__(self, *commands: CommandPort, logger: Optional[logging.Logger] = None) -> None:
        self._commands: dict[str, CommandPort] = {}
        self._logger = logger or logging.getLogger(__name__)
        for command in commands:
            self.register(command)

    def register(self, command: CommandPort) -> None:
        """
        Add a command, replacing any previous command with the same name.

        Args:
            command: Command to register
        """
        name = command.spec["name"]
        if name in self._commands:
            self._logger.warning(f"Replacing command: {name}")
        self._commands[name] = command

    def available_commands(self) -> list[CommandSpec]:
        return [c.spec for c in self._commands.values()]

    def dispatch(self, tokens: list[str], session: Session) -> CommandOutcome:
        """
        Run the command named by the first token with the remaining tokens.

        Args:
            tokens: Non-empty token list, command name first
            session: Current session

        Returns:
            The command's outcome

        Raises:
            UnknownCommandError: If no command has that name
        """
        name, args = tokens[0], tokens[1:]
        command = self._commands.get(name)
        if command is None:
            raise UnknownCommandError(name)
        self._logger.debug(f"Dispatching {name} with {len(args)} argument(s)")
        return command.execute(args, session)


class HelpCommand(CommandPort):
    """Lists every registered command."""

    def __init__(self, registry: CommandRegistry) -> None:
        self._registry = registry

    @property
    @override
    def spec(self) -> CommandSpec:
        return {"name": "help", "usage": "help", "description": "Show all commands"}

    @override
    def execute(self, args: list[str], session: Session) -> CommandOutcome:
        specs = self._registry.available_commands()
        width = max(len(s["usage"]) for s in specs)
        lines = ["Supported commands:"]
        lines.extend(f"  {s['usage']:<{width}}  {s['description']}" for s in specs)
        return CommandOutcome(lines=lines)


class ExitCommand(CommandPort):
    @property
    @override
    def spec(self) -> CommandSpec:
        return {"name": "exit", "usage": "exit", "description": "Exit the program"}

    @override
    def execute(self, args: list[str], session: Session) -> CommandOutcome:
        return CommandOutcome(lines=[EXIT_MESSAGE], exit_requested=True)
