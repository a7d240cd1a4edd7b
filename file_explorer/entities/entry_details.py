"""
Entry details domain entity, the result of the stat command.
"""

import os
from dataclasses import dataclass
from typing import Optional

from file_explorer.utils.formatting import format_size, format_timestamp, printable


@dataclass(frozen=True)
class EntryDetails:
    """Metadata for a single file or directory."""

    absolute_path: str
    is_dir: bool
    size_bytes: Optional[int]
    created_at: float
    modified_at: float
    accessed_at: float

    @classmethod
    def from_stat(cls, path: str, st: os.stat_result, is_dir: bool) -> "EntryDetails":
        """
        Build details from an os.stat result.

        The creation time is the birth time on platforms that record one and
        the inode change time elsewhere.
        """
        return cls(
            absolute_path=os.path.abspath(path),
            is_dir=is_dir,
            size_bytes=None if is_dir else st.st_size,
            created_at=getattr(st, "st_birthtime", st.st_ctime),
            modified_at=st.st_mtime,
            accessed_at=st.st_atime,
        )

    @property
    def type_label(self) -> str:
        return "Dir" if self.is_dir else "File"

    def to_lines(self) -> list[str]:
        return [
            f"Type: {self.type_label}",
            f"Path: {printable(self.absolute_path)}",
            f"Size: {format_size(self.size_bytes)}",
            f"Create Time: {format_timestamp(self.created_at)}",
            f"Modify Time: {format_timestamp(self.modified_at)}",
            f"Access Time: {format_timestamp(self.accessed_at)}",
        ]
