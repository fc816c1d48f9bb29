"""
Kernel test configuration.

Shared fixtures: fresh stores and a complete set of post fields.
"""

import pytest

from newsroom.kernel.posts import PostRepository


def make_fields(**overrides):
    """Complete create() payload; override any field by keyword."""
    fields = {
        "title": "Hello",
        "content": "World",
        "excerpt": "",
        "image": "",
        "author": "Jane",
        "date": "2025-01-01",
        "read_time": "3 min",
        "category": "ai",
        "status": "draft",
        "tags": ["x"],
    }
    fields.update(overrides)
    return fields


@pytest.fixture
def repo():
    return PostRepository()


@pytest.fixture
def post_fields():
    return make_fields()
