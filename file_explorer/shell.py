from __future__ import annotations

import logging
from typing import Callable, Optional

from rich.console import Console

from file_explorer.config.settings import DEFAULT_PROMPT
from file_explorer.entities.session import Session
from file_explorer.exceptions import CommandParseError, UnknownCommandError
from file_explorer.ports.commands.command_port import CommandOutcome
from file_explorer.use_cases.commands.registry import CommandRegistry
from file_explorer.utils.tokenizer import tokenize

YES_ANSWERS = ("y", "yes")


def make_console(color: bool = True, **kwargs) -> Console:
    """Console that prints user data verbatim (no markup, emoji codes or highlighting)."""
    return Console(
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
        no_color=not color,
        **kwargs,
    )


class Shell:
    """Read-eval-print loop over a command registry.

    Each line is tokenized, dispatched to the command named by its first
    token and the outcome printed before the next line is read. The shell
    also answers the session's confirmation questions from the same input.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        session: Optional[Session] = None,
        console: Optional[Console] = None,
        read_line: Optional[Callable[[], str]] = None,
        prompt: str = DEFAULT_PROMPT,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._registry = registry
        self._console = console or make_console()
        self._read_line = read_line or input
        self._prompt = prompt
        self._logger = logger or logging.getLogger(__name__)
        self.session = session or Session()
        self.session.confirm = self.confirm

    def confirm(self, question: str) -> bool:
        self._console.print(question, end="")
        try:
            answer = self._read_line()
        except EOFError:
            self._console.print()
            return False
        return answer.strip().lower() in YES_ANSWERS

    def _render(self, outcome: CommandOutcome) -> None:
        style = "red" if outcome.is_error else None
        for line in outcome.lines:
            self._console.print(line, style=style)

    def handle_line(self, line: str) -> bool:
        """
        Execute one input line.

        Returns:
            False when the loop should stop, True otherwise
        """
        try:
            tokens = tokenize(line)
        except CommandParseError as e:
            self._console.print(str(e), style="red")
            return True
        if not tokens:
            return True

        try:
            outcome = self._registry.dispatch(tokens, self.session)
        except UnknownCommandError as e:
            self._console.print(str(e), style="red")
            return True

        self._render(outcome)
        return not outcome.exit_requested

    def run(self) -> int:
        """
        Loop until 'exit' or end of input.

        Returns:
            Process exit status (always 0)
        """
        self._logger.info(f"Shell started in {self.session.cwd}")
        while True:
            self._console.print(self._prompt, end="")
            try:
                line = self._read_line()
            except (EOFError, KeyboardInterrupt):
                self._console.print()
                break
            if not self.handle_line(line):
                break
        self._logger.info("Shell stopped")
        return 0
