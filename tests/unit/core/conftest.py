"""Shared fixtures for core unit tests"""

import pytest


LEFT = "test\n4321\nHello Nutek!\n"
RIGHT = "test\nHello World!\nHello Nutek!\n"


@pytest.fixture(name="texts")
def texts_fixture():
    return LEFT, RIGHT


@pytest.fixture(name="tree")
def tree_fixture(tmp_path):
    """A small directory tree with a .gitignore, a hidden dir, and nested files.

    tmp_path is marked as the repository root so no ignore file above it applies.
    """
    (tmp_path / ".git").mkdir()
    root = tmp_path / "proj"
    (root / "src").mkdir(parents=True)
    (root / "build").mkdir()
    (root / ".hidden").mkdir()
    (root / ".gitignore").write_text("build/\n*.log\n")
    (root / "README.md").write_text("# readme\n")
    (root / "debug.log").write_text("noise\n")
    (root / "src" / "main.py").write_text("print('hi')\n")
    (root / "src" / "trace.log").write_text("noise\n")
    (root / "build" / "out.bin").write_bytes(b"\x00\x01")
    (root / ".hidden" / "secret.txt").write_text("s\n")
    return root
