"""
Search result domain entity.
"""

import os
from dataclasses import dataclass

from file_explorer.utils.formatting import printable


@dataclass(frozen=True)
class SearchResult:
    """An entry whose base name matched a search keyword."""

    absolute_path: str
    is_dir: bool

    @classmethod
    def from_path(cls, path: str, is_dir: bool) -> "SearchResult":
        """Build a result, marking directories with a trailing separator."""
        absolute = os.path.abspath(path)
        if is_dir:
            absolute += os.sep
        return cls(absolute_path=absolute, is_dir=is_dir)

    @property
    def type_label(self) -> str:
        return "Dir" if self.is_dir else "File"

    def __str__(self) -> str:
        return f"{printable(self.absolute_path)} ({self.type_label})"
