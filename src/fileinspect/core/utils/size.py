"""File size lookup and binary-unit formatting"""

import os

from fileinspect.core.errors import FileIOError


UNITS = ("B", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")


def format_size(num_bytes: int) -> str:
    """Format a byte count with 1024-based units and one decimal (4 -> '4.0B')."""
    size = float(num_bytes)
    i = 0
    while size >= 1024.0 and i < len(UNITS) - 1:
        size /= 1024.0
        i += 1
    return f"{size:.1f}{UNITS[i]}"


def file_size(path: str | os.PathLike) -> int:
    """Return the size of the file at path in bytes."""
    try:
        return os.stat(path).st_size
    except OSError as e:
        raise FileIOError(path, "reading size of", e) from e


def human_readable_size(path: str | os.PathLike) -> str:
    return format_size(file_size(path))
