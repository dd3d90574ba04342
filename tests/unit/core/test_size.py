"""Unit tests for core/utils/size.py"""

import pytest

from fileinspect.core.errors import FileIOError
from fileinspect.core.utils.size import file_size, format_size, human_readable_size


@pytest.mark.parametrize("num_bytes,expected", [
    (0, "0.0B"),
    (4, "4.0B"),
    (1023, "1023.0B"),
    (1024, "1.0KB"),
    (1536, "1.5KB"),
    (1024 ** 2, "1.0MB"),
    (5 * 1024 ** 3, "5.0GB"),
    (1024 ** 8, "1.0YB"),
    (2048 * 1024 ** 8, "2048.0YB"),
])
def test_format_size(num_bytes, expected):
    """Sizes step by 1024 with one decimal digit, capped at YB."""
    assert format_size(num_bytes) == expected


def test_file_size_counts_bytes(tmp_path):
    """file_size reports bytes, not characters."""
    p = tmp_path / "test.txt"
    p.write_text("test")
    assert file_size(p) == 4
    p.write_text("🎶", encoding="utf-8")
    assert file_size(p) == 4


def test_human_readable_size(tmp_path):
    p = tmp_path / "test.txt"
    p.write_text("test")
    assert human_readable_size(p) == "4.0B"


def test_human_readable_size_missing_file(tmp_path):
    with pytest.raises(FileIOError, match="nope"):
        human_readable_size(tmp_path / "nope")
