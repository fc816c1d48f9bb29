"""
Pytest configuration and fixtures for API tests.

Every test gets a fresh Site behind the app, so state never leaks between
tests.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from backend.main import app
from backend.store import get_site
from newsroom.kernel.site import Site

ADMIN = {"email": "admin@technova.com", "password": "admin123"}

POST_PAYLOAD = {
    "title": "Hello",
    "content": "World",
    "excerpt": "",
    "image": "",
    "author": "Jane Doe",
    "date": "2025-01-01",
    "readTime": "3 min",
    "category": "ai",
    "status": "draft",
    "tags": ["x"],
}


@pytest.fixture
def site():
    return Site()


@pytest.fixture
def client(site):
    """HTTP client against the app, wired to this test's site."""
    app.dependency_overrides[get_site] = lambda: site
    yield TestClient(app)
    app.dependency_overrides = {}


@pytest.fixture
def admin_client(client):
    """Client with the admin session already open."""
    res = client.post("/api/session/login", json=ADMIN)
    assert res.status_code == 200
    return client


@pytest.fixture
def seeded_site():
    return Site(seed_demo_content=True)


@pytest.fixture
def seeded_client(seeded_site):
    app.dependency_overrides[get_site] = lambda: seeded_site
    yield TestClient(app)
    app.dependency_overrides = {}


@pytest.fixture
def post_payload():
    """Complete create payload as the site client sends it."""
    return dict(POST_PAYLOAD)
