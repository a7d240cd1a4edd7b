"""
Text rendering helpers for listings, timestamps and disk usage.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Iterable, Optional, Sequence

if TYPE_CHECKING:
    from file_explorer.entities.directory_entry import DirectoryEntry

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
UNKNOWN = "-"

KIB = 1024
MIB = 1024 * 1024

LISTING_HEADERS = ("Name", "Type", "Size(B)", "Modify Time")


def format_timestamp(value: Optional[float]) -> str:
    """Render an epoch timestamp in local time, or '-' when unknown."""
    if value is None:
        return UNKNOWN
    try:
        return datetime.fromtimestamp(value).strftime(TIMESTAMP_FORMAT)
    except (OverflowError, OSError, ValueError):
        return UNKNOWN


def printable(text: str) -> str:
    """Escape characters that do not print as themselves, such as tabs, as backslash sequences."""
    if text.isprintable():
        return text
    return "".join(
        ch if ch.isprintable() else ch.encode("unicode_escape").decode("ascii")
        for ch in text
    )


def format_size(size_bytes: Optional[int]) -> str:
    return UNKNOWN if size_bytes is None else str(size_bytes)


def format_disk_usage(total_bytes: int) -> str:
    """
    Convert a byte total into whole megabytes or kilobytes.

    Values of at least one MiB are reported in MB, everything else in KB.
    Both round half up: half a unit is added before the integer division.

    Args:
        total_bytes: Number of bytes to convert

    Returns:
        A string such as "3 MB" or "1 KB"
    """
    if total_bytes >= MIB:
        return f"{(total_bytes + MIB // 2) // MIB} MB"
    return f"{(total_bytes + KIB // 2) // KIB} KB"


def _column_widths(rows: Sequence[Sequence[str]]) -> list[int]:
    widths = [len(h) for h in LISTING_HEADERS]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))
    return widths


def _render_row(row: Sequence[str], widths: Sequence[int]) -> str:
    name, type_, size, modified = row
    return " ".join(
        [
            name.ljust(widths[0]),
            type_.ljust(widths[1]),
            size.rjust(widths[2]),
            modified,
        ]
    )


def format_listing(entries: Iterable[DirectoryEntry]) -> list[str]:
    """
    Lay out directory entries as a four column table.

    Every column is as wide as its widest cell (header included); Name and
    Type are left aligned, Size is right aligned and Modify Time is left
    unpadded. Columns are separated by a single space.

    Args:
        entries: Entries in the order they should be printed

    Returns:
        The header line followed by one line per entry
    """
    rows = [
        (e.display_name, e.type_label, e.size_label, e.modify_time_label) for e in entries
    ]
    widths = _column_widths(rows)
    return [_render_row(r, widths) for r in [LISTING_HEADERS, *rows]]
