"""Root test configuration: isolate each test from the caller's config and environment"""

import os

import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run every test in its own cwd with no POSTMATTER_* variables set."""
    for name in list(os.environ):
        if name.startswith("POSTMATTER_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
