"""Data models for diff operations and file inspection results"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TypedDict, Union

from pydantic import BaseModel

from fileinspect.core.errors import FileIOError


@dataclass(frozen=True)
class Removed:
    """A line present only in the left text."""
    line: str


@dataclass(frozen=True)
class Unchanged:
    """A line matched in both texts; one copy is kept."""
    line: str


@dataclass(frozen=True)
class Added:
    """A line present only in the right text."""
    line: str


DiffOp = Union[Removed, Unchanged, Added]
DiffSequence = tuple[DiffOp, ...]


# "not changed" is not an identifier, hence the functional form.
Summary = TypedDict("Summary", {"removed": int, "not changed": int, "added": int, "lines": int})


@dataclass(frozen=True)
class WalkEntry:
    """One walked path; error is set when the entry could not be read."""
    path:  Path
    error: Optional[FileIOError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class FileInfo(BaseModel):
    """Inspection result for a single file."""
    path:       str
    mime_type:  str
    is_text:    bool
    size:       int
    human_size: str
    sha256:     str
