"""
Newsroom Kernel — Read Projections

Pure helpers deriving what the site shows from a snapshot of posts.
They never mutate their input and never touch a store.
"""

from __future__ import annotations

from dataclasses import dataclass

from newsroom.kernel.types import Post, format_thousands, parse_views


@dataclass
class DashboardStats:
    total_posts: int
    published: int
    drafts: int
    total_views: float

    @property
    def total_views_display(self) -> str:
        return format_thousands(self.total_views)


@dataclass
class AuthorCard:
    name: str
    handle: str


def featured_post(posts: list[Post]) -> Post | None:
    """The editor's pick: first published post, else the first post."""
    for post in posts:
        if post.status == "published":
            return post
    return posts[0] if posts else None


def latest_posts(posts: list[Post], limit: int = 6) -> list[Post]:
    """Posts after the featured slot."""
    return posts[1 : limit + 1]


def posts_in_category(posts: list[Post], category_id: str) -> list[Post]:
    return [p for p in posts if p.category == category_id]


def popular_posts(posts: list[Post], limit: int = 3) -> list[Post]:
    """Most viewed first; ties keep listing order."""
    return sorted(posts, key=lambda p: parse_views(p.views), reverse=True)[:limit]


def dashboard_stats(posts: list[Post]) -> DashboardStats:
    published = sum(1 for p in posts if p.status == "published")
    return DashboardStats(
        total_posts=len(posts),
        published=published,
        drafts=len(posts) - published,
        total_views=sum((parse_views(p.views) for p in posts), 0.0),
    )


def author_card(name: str) -> AuthorCard:
    display = name.strip() or "Anonymous"
    return AuthorCard(name=display, handle="@" + display.lower().replace(" ", ""))
