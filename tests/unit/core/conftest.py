"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_MD = """\
---
title: Hello
date: 2024-01-01
tags: [x, y]
---
# Hi

Some **bold** text.
"""

DRAFT_MD = """\
---
title: Not yet
draft: true
---
Work in progress.
"""


@pytest.fixture(name="write_post")
def write_post_fixture(posts_dir):
    """Factory: write text to posts_dir/<name> and return the path."""
    def _write(name: str, text: str):
        path = posts_dir / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="draft_md")
def draft_md_fixture():
    return DRAFT_MD
