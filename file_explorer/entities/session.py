"""
Session domain entity holding the explorer's working directory.
"""

import os
from typing import Callable, Optional

Confirmer = Callable[[str], bool]


def _decline(question: str) -> bool:
    return False


class Session:
    """
    Per-process explorer state.

    The working directory lives here rather than in the process, so every
    command resolves relative paths against ``cwd`` at call time and the
    interpreter's own working directory is never changed.
    """

    def __init__(self, cwd: Optional[str] = None, confirm: Optional[Confirmer] = None):
        """
        Initialize the session.

        Args:
            cwd: Starting directory. Defaults to the process working directory.
            confirm: Callable asking a yes/no question. Defaults to always declining.
        """
        self._cwd = os.path.realpath(cwd or os.getcwd())
        self.confirm: Confirmer = confirm or _decline

    @property
    def cwd(self) -> str:
        return self._cwd

    def resolve(self, path: str) -> str:
        """
        Resolve a path relative to the working directory.

        Args:
            path: Absolute or relative path as typed by the user

        Returns:
            An absolute path
        """
        return os.path.join(self._cwd, path)

    def change_directory(self, path: str) -> None:
        """
        Move the working directory.

        The caller is responsible for checking that the target is a directory.

        Args:
            path: Absolute or relative path of the new working directory
        """
        self._cwd = os.path.realpath(self.resolve(path))

    def __repr__(self) -> str:
        return f"Session(cwd='{self._cwd}')"
