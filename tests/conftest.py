"""Root test configuration: isolate tests from FILEINSPECT_* environment variables"""

import os

import pytest


@pytest.fixture(autouse=True)
def clear_fileinspect_env(monkeypatch):
    """Drop any FILEINSPECT_* variables inherited from the developer shell."""
    for name in list(os.environ):
        if name.startswith("FILEINSPECT_"):
            monkeypatch.delenv(name)
