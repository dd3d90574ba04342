"""Recursive directory walk honoring .gitignore-style ignore files"""

import errno
import logging
import os
from pathlib import Path
from typing import Iterator, Optional, Sequence

import pathspec

from fileinspect.core.errors import FileIOError
from fileinspect.core.models import WalkEntry


logger = logging.getLogger("fileinspect.core.walk")

IGNORE_FILES = (".gitignore", ".ignore")

# (walked path the patterns are anchored at, prefix locating it inside the
# ignore file's directory, compiled patterns); shallowest first.
_Rules = list[tuple[Path, str, pathspec.GitIgnoreSpec]]


def _read_specs(directory: Path, ignore_files: Sequence[str]) -> list[pathspec.GitIgnoreSpec]:
    """Compile every ignore file present in directory."""
    specs = []
    for name in ignore_files:
        f = directory / name
        if not f.is_file():
            continue
        try:
            lines = f.read_text(encoding="utf-8", errors="replace").splitlines()
        except OSError as e:
            logger.warning("Cannot read ignore file %s: %s", f, e.strerror)
            continue
        specs.append(pathspec.GitIgnoreSpec.from_lines(lines))
    return specs


def _parent_rules(start: Path, ignore_files: Sequence[str]) -> _Rules:
    """Rules from directories above start, up to the enclosing git repository root."""
    resolved = start.resolve()
    rules: _Rules = []
    if (resolved / ".git").exists():
        return rules
    for parent in resolved.parents:
        prefix = resolved.relative_to(parent).as_posix() + "/"
        # Deeper parents come later in the list.
        rules[:0] = [(start, prefix, spec) for spec in _read_specs(parent, ignore_files)]
        if (parent / ".git").exists():
            break
    return rules


def _ignore_verdict(path: Path, is_dir: bool, rules: _Rules) -> Optional[bool]:
    """True if ignored, False if re-included, None if no pattern matched.

    The deepest ignore file with a matching pattern decides; within a file the
    last matching pattern wins.
    """
    for base, prefix, spec in reversed(rules):
        rel = prefix + path.relative_to(base).as_posix()
        if is_dir:
            rel += "/"
        include = spec.check_file(rel).include
        if include is not None:
            return include
    return None


def walk(
    root: str | os.PathLike = "",
    include_hidden: bool = True,
    ignore_files: Sequence[str] = IGNORE_FILES,
    ) -> Iterator[WalkEntry]:
    """Yield the root and everything below it, depth first, sorted by name.

    An empty root walks the current directory. Ignore files in the root, below
    it, and in its parents up to the git repository root apply; a deeper file
    overrides a shallower one. A directory that cannot be listed is yielded
    with its error set and the walk continues with its siblings.
    """
    start = Path(root) if os.fspath(root) else Path(".")
    if not start.exists():
        yield WalkEntry(start, FileIOError(start, "walking", FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT))))
        return
    yield WalkEntry(start)
    if start.is_dir():
        yield from _walk_dir(start, include_hidden, ignore_files, _parent_rules(start, ignore_files))


def _walk_dir(directory: Path, include_hidden: bool, ignore_files: Sequence[str], rules: _Rules) -> Iterator[WalkEntry]:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        logger.warning("Cannot list %s: %s", directory, e.strerror)
        yield WalkEntry(directory, FileIOError(directory, "listing", e))
        return

    rules = rules + [(directory, "", spec) for spec in _read_specs(directory, ignore_files)]
    for entry in entries:
        if not include_hidden and entry.name.startswith("."):
            continue
        path = directory / entry.name
        try:
            is_dir = entry.is_dir()
        except OSError as e:
            yield WalkEntry(path, FileIOError(path, "reading", e))
            continue
        if _ignore_verdict(path, is_dir, rules):
            logger.debug("Ignored %s", path)
            continue
        yield WalkEntry(path)
        if is_dir and not entry.is_symlink():
            yield from _walk_dir(path, include_hidden, ignore_files, rules)


def walk_paths(
    root: str | os.PathLike = "",
    include_hidden: bool = True,
    ignore_files: Sequence[str] = IGNORE_FILES,
    ) -> str:
    """Newline-terminated listing of every successfully walked path."""
    return "".join(f"{e.path}\n" for e in walk(root, include_hidden, ignore_files) if e.ok)
