"""
Directory entry domain entity.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from file_explorer.utils.formatting import format_size, format_timestamp, printable


class ListingMode(Enum):
    """Ordering applied to a directory listing."""

    PLAIN = "plain"
    SORT_BY_SIZE = "size"
    SORT_BY_TIME = "time"

    @classmethod
    def from_option(cls, option: Optional[str]) -> "ListingMode":
        """
        Map an ls option to a mode.

        Args:
            option: None for plain listing, "-s" or "-t"

        Raises:
            ValueError: If the option is not recognised
        """
        if option is None:
            return cls.PLAIN
        try:
            return _OPTIONS[option]
        except KeyError:
            raise ValueError(f"Unsupported ls option: {option}") from None


_OPTIONS = {"-s": ListingMode.SORT_BY_SIZE, "-t": ListingMode.SORT_BY_TIME}


@dataclass(frozen=True)
class DirectoryEntry:
    """
    One immediate child of a listed directory.

    Attributes:
        name: Base name, with a trailing "/" for directories
        is_dir: Whether the entry is a directory
        size_bytes: Size in bytes, None when unknown or not computed
        modified_at: Modification time in whole epoch seconds, None when unknown
        is_empty_dir: Whether the entry is a directory without children
    """

    name: str
    is_dir: bool
    size_bytes: Optional[int] = None
    modified_at: Optional[int] = None
    is_empty_dir: bool = False

    @property
    def display_name(self) -> str:
        return printable(self.name)

    @property
    def type_label(self) -> str:
        return "Dir" if self.is_dir else "File"

    @property
    def size_label(self) -> str:
        return format_size(self.size_bytes)

    @property
    def modify_time_label(self) -> str:
        return format_timestamp(self.modified_at)
