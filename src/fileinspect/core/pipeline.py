"""Pipeline step functions: read, diff, inspect, and walk orchestration"""

import logging
from pathlib import Path
from typing import Sequence

from fileinspect.config import Settings
from fileinspect.core.diff import compute_diff, summarize
from fileinspect.core.errors import FileIOError, NotTextFileError
from fileinspect.core.filetype import exact_mime_type, is_text_file
from fileinspect.core.models import DiffSequence, FileInfo, Summary
from fileinspect.core.utils.hashing import sha256_file
from fileinspect.core.utils.size import file_size, format_size
from fileinspect.core.walk import walk


logger = logging.getLogger("fileinspect.core.pipeline")


def read_text(path: Path, sniff_bytes: int = 8000, extra_types: dict[str, str] | None = None) -> str:
    """Read a UTF-8 text file, refusing files classified as binary."""
    if not is_text_file(path, sniff_bytes, extra_types):
        raise NotTextFileError(path)
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise NotTextFileError(path) from e
    except OSError as e:
        raise FileIOError(path, "reading", e) from e


def run_diff(
    left: Path,
    right: Path,
    sniff_bytes: int = 8000,
    extra_types: dict[str, str] | None = None,
    ) -> tuple[DiffSequence, Summary]:
    """Diff two text files. Returns (ops, summary)."""
    ops = compute_diff(read_text(left, sniff_bytes, extra_types), read_text(right, sniff_bytes, extra_types))
    summary = summarize(ops)
    logger.info("Diffed %s and %s: %s", left, right, summary)
    return ops, summary


def run_inspect(path: Path, settings: Settings) -> FileInfo:
    """Collect mime type, text/binary class, size, and hash for one file."""
    size = file_size(path)
    return FileInfo(
        path=str(path),
        mime_type=exact_mime_type(path, settings.mime_types),
        is_text=is_text_file(path, settings.sniff_bytes, settings.mime_types),
        size=size,
        human_size=format_size(size),
        sha256=sha256_file(path, settings.hash_chunk_size),
    )


def run_walk(
    root: str,
    include_hidden: bool,
    ignore_files: Sequence[str],
    ) -> tuple[list[Path], list[FileIOError]]:
    """Walk root. Returns (paths, errors); errors never stop the walk."""
    paths, errors = [], []
    for entry in walk(root, include_hidden, ignore_files):
        if entry.ok:
            paths.append(entry.path)
        else:
            errors.append(entry.error)
    if errors:
        logger.warning("Walk of %r finished with %d error(s)", root or ".", len(errors))
    return paths, errors
