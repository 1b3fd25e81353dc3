"""Root test configuration: isolate tests from the caller's environment"""

import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop MDPOSTS_* env vars so only the settings a test sets itself apply."""
    for name in list(os.environ):
        if name.startswith("MDPOSTS_"):
            monkeypatch.delenv(name)


@pytest.fixture(name="posts_dir")
def posts_dir_fixture(tmp_path):
    """An empty content/posts directory under tmp_path (the default input_dir)."""
    d = tmp_path / "content" / "posts"
    d.mkdir(parents=True)
    return d
