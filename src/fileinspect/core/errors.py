"""Exception types raised by the file inspection helpers"""

import os


class FileInspectError(Exception):
    """Base exception for fileinspect errors."""


class FileIOError(FileInspectError):
    """A file could not be opened, read, listed, or stat'ed."""

    def __init__(self, path: str | os.PathLike, action: str, cause: OSError):
        self.path = str(path)
        self.action = action
        self.errno = cause.errno
        self.strerror = cause.strerror or str(cause)
        super().__init__(f"Error {action} {self.path}: {self.strerror}")


class NotTextFileError(FileInspectError):
    """A file was classified as binary where text was required."""

    def __init__(self, path: str | os.PathLike):
        self.path = str(path)
        super().__init__(f"Not a text file: {self.path}")
