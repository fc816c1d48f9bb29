"""Tests for /api/pages — home, categories, post view, dashboard."""

from __future__ import annotations


class TestHome:
    def test_empty_site(self, client):
        assert client.get("/api/pages/home").json() == {"featured": None, "latest": []}

    def test_seeded_home(self, seeded_client, seeded_site):
        data = seeded_client.get("/api/pages/home").json()
        published = seeded_site.published_posts()
        assert data["featured"]["id"] == published[0].id
        assert [p["id"] for p in data["latest"]] == [p.id for p in published[1:]]


class TestCategories:
    def test_lists_catalog(self, client):
        ids = [c["id"] for c in client.get("/api/pages/categories").json()]
        assert ids == ["ai", "cybersecurity", "gadgets", "programming", "startups"]

    def test_category_posts(self, seeded_client):
        data = seeded_client.get("/api/pages/categories/ai").json()
        assert data["category"]["name"] == "AI"
        assert all(p["category"] == "ai" for p in data["posts"])
        assert data["posts"]

    def test_unknown_category(self, client):
        assert client.get("/api/pages/categories/cooking").status_code == 404


class TestPostView:
    def test_requires_open_post(self, client):
        assert client.get("/api/pages/post").status_code == 404

    def test_shows_post_author_and_comments(self, seeded_client, seeded_site):
        post = seeded_site.published_posts()[0]
        seeded_client.post("/api/navigation", json={"page": "post", "context": post.id})
        data = seeded_client.get("/api/pages/post").json()
        assert data["post"]["id"] == post.id
        assert data["author"]["handle"] == "@" + post.author.lower().replace(" ", "")
        assert len(data["comments"]) == 2

    def test_missing_post(self, client):
        client.post("/api/navigation", json={"page": "post", "context": "gone"})
        assert client.get("/api/pages/post").status_code == 404


class TestDashboard:
    def test_requires_admin(self, client):
        assert client.get("/api/pages/admin").status_code == 401

    def test_stats(self, admin_client, site):
        site.create_post({"title": "A", "status": "published"})
        site.create_post({"title": "B"})
        data = admin_client.get("/api/pages/admin").json()
        assert data["totalPosts"] == 2
        assert data["published"] == 1
        assert data["drafts"] == 1
        assert data["totalViews"] == "0.0K"
        assert len(data["posts"]) == 2
