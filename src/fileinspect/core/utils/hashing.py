"""SHA-256 content hashing for files"""

import hashlib
import os

from fileinspect.core.errors import FileIOError


def sha256_file(path: str | os.PathLike, chunk_size: int = 65536) -> str:
    """Return lowercase hex SHA-256 of the full file contents.

    Raises FileIOError (path plus OS error text) when the file is missing,
    unreadable, or a directory.
    """
    h = hashlib.sha256()
    try:
        with open(path, "rb") as f:
            while chunk := f.read(chunk_size):
                h.update(chunk)
    except OSError as e:
        raise FileIOError(path, "hashing", e) from e
    return h.hexdigest()
