"""Extension-based MIME lookup and text/binary classification"""

import logging
import mimetypes
import os

from fileinspect.core.errors import FileIOError


logger = logging.getLogger("fileinspect.core.filetype")

OCTET_STREAM = "application/octet-stream"
SNIFF_BYTES = 8000

# Extensions known to common mime tables but missing from Python's defaults.
EXTRA_TYPES = {
    ".toml": "text/x-toml",
    ".rs":   "text/x-rust",
    ".go":   "text/x-go",
    ".ts":   "text/x-typescript",
    ".yaml": "text/x-yaml",
    ".yml":  "text/x-yaml",
    ".md":   "text/markdown",
    ".ini":  "text/plain",
    ".cfg":  "text/plain",
}


def _build_table(extra_types: dict[str, str] | None = None) -> mimetypes.MimeTypes:
    """A private MimeTypes table; the global mimetypes state is left untouched."""
    table = mimetypes.MimeTypes()
    for ext, mime in {**EXTRA_TYPES, **(extra_types or {})}.items():
        ext = ext if ext.startswith(".") else f".{ext}"
        table.add_type(mime, ext.lower())
    return table


_default_table = _build_table()


def guess_mime_type(path: str | os.PathLike, extra_types: dict[str, str] | None = None) -> str | None:
    """Return the media type for path's extension, or None when unknown."""
    table = _build_table(extra_types) if extra_types else _default_table
    mime, _ = table.guess_type(os.fspath(path), strict=False)
    return mime


def exact_mime_type(path: str | os.PathLike, extra_types: dict[str, str] | None = None) -> str:
    """Best-effort media type from the extension alone; octet-stream when unknown."""
    return guess_mime_type(path, extra_types) or OCTET_STREAM


def is_text_file(
    path: str | os.PathLike,
    sniff_bytes: int = SNIFF_BYTES,
    extra_types: dict[str, str] | None = None,
    ) -> bool:
    """Classify path as text (True) or binary (False).

    A known extension decides by its top-level type. Otherwise the first
    sniff_bytes bytes are read and the file is text iff they hold no NUL byte.
    The file only has to exist when the extension is unknown.
    """
    mime = guess_mime_type(path, extra_types)
    if mime is not None:
        return mime.startswith("text/")

    logger.debug("Unknown extension, sniffing content of %s", path)
    try:
        with open(path, "rb") as f:
            head = f.read(sniff_bytes)
    except OSError as e:
        raise FileIOError(path, "checking type of", e) from e
    return b"\x00" not in head
