"""CLI command implementations"""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from fileinspect.config import Settings, load_config
from fileinspect.core.diff import format_diff
from fileinspect.core.errors import FileInspectError
from fileinspect.core.pipeline import run_diff, run_inspect, run_walk
from fileinspect.core.utils.hashing import sha256_file


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    """File inspection and line diff utilities."""
    settings = _settings()
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )


def diff_cmd(
    left: Annotated[Path, typer.Argument(help="Left (old) text file")],
    right: Annotated[Path, typer.Argument(help="Right (new) text file")],
    ):
    """Print a numbered line diff of two text files."""
    settings = _settings()
    try:
        ops, _ = run_diff(left, right, settings.sniff_bytes, settings.mime_types)
    except FileInspectError as e:
        _fail(str(e))
    typer.echo(format_diff(ops), nl=False)


def summary_cmd(
    left: Annotated[Path, typer.Argument(help="Left (old) text file")],
    right: Annotated[Path, typer.Argument(help="Right (new) text file")],
    as_json: Annotated[bool, typer.Option("--json", help="Print the summary as JSON")] = False,
    ):
    """Print removed/unchanged/added character counts and the changed-line counter."""
    settings = _settings()
    try:
        _, summary = run_diff(left, right, settings.sniff_bytes, settings.mime_types)
    except FileInspectError as e:
        _fail(str(e))
    if as_json:
        typer.echo(json.dumps(summary, indent=2))
        return
    for key, value in summary.items():
        typer.echo(f"{key}: {value}")


def walk_cmd(
    root: Annotated[str, typer.Argument(help="Directory to walk; defaults to the current directory")] = "",
    hidden: Annotated[Optional[bool], typer.Option("--hidden/--no-hidden", help="Include dot-prefixed entries")] = None,
    ):
    """List files recursively, honoring .gitignore and .ignore files."""
    settings = _settings(overrides={"include_hidden": hidden})
    paths, errors = run_walk(root, settings.include_hidden, settings.ignore_files)
    for p in paths:
        typer.echo(str(p))
    for err in errors:
        typer.echo(f"Error: {err}", err=True)
    if errors:
        raise typer.Exit(1)


def info_cmd(
    path: Annotated[Path, typer.Argument(help="File to inspect")],
    as_json: Annotated[bool, typer.Option("--json", help="Print the result as JSON")] = False,
    ):
    """Show media type, text/binary class, size, and SHA-256 of a file."""
    settings = _settings()
    try:
        info = run_inspect(path, settings)
    except FileInspectError as e:
        _fail(str(e))
    if as_json:
        typer.echo(info.model_dump_json(indent=2))
        return
    typer.echo(f"path:   {info.path}")
    typer.echo(f"mime:   {info.mime_type}")
    typer.echo(f"text:   {'yes' if info.is_text else 'no'}")
    typer.echo(f"size:   {info.human_size} ({info.size} bytes)")
    typer.echo(f"sha256: {info.sha256}")


def hash_cmd(
    path: Annotated[Path, typer.Argument(help="File to hash")],
    ):
    """Print the SHA-256 digest of a file."""
    settings = _settings()
    try:
        digest = sha256_file(path, settings.hash_chunk_size)
    except FileInspectError as e:
        _fail(str(e))
    typer.echo(digest)
