"""
Newsroom Kernel — Shared Types

Data classes used across the post repository, comment ledger, session guard
and navigation router. These are the contracts that bind the kernel together.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from typing import Any

# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

POST_STATUSES: tuple[str, ...] = ("draft", "published")

# Pages that never carry a context payload
STATIC_PAGES: set[str] = {
    "home",
    "categories",
    "all-posts",
    "admin",
    "about",
    "contact",
    "privacy",
    "terms",
    "cookies",
}

PAGE_IDS: set[str] = STATIC_PAGES | {"post", "category"}

# Fields a caller may supply on create / update
POST_FIELDS: tuple[str, ...] = (
    "title",
    "content",
    "excerpt",
    "image",
    "author",
    "date",
    "read_time",
    "category",
    "status",
    "tags",
)

# Assigned by the repository, never by callers
DERIVED_POST_FIELDS: set[str] = {"id", "views"}

DEFAULT_VIEWS = "0"
DEFAULT_AVATAR = "/api/placeholder/40/40"

# ---------------------------------------------------------------------------
# Error kinds
# ---------------------------------------------------------------------------

VALIDATION_ERROR = "VALIDATION_ERROR"
NOT_FOUND = "NOT_FOUND"
INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
UNKNOWN_PAGE = "UNKNOWN_PAGE"

ERROR_KINDS: set[str] = {VALIDATION_ERROR, NOT_FOUND, INVALID_CREDENTIALS, UNKNOWN_PAGE}

VIEWS_PATTERN = re.compile(r"^(\d+(?:\.\d+)?)(K?)$")


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass
class Post:
    """One article. `id` and `views` are owned by the repository."""

    id: str
    title: str
    content: str = ""
    excerpt: str = ""
    image: str = ""
    author: str = ""
    date: str = ""
    read_time: str = ""
    category: str = ""
    status: str = "draft"
    tags: list[str] = field(default_factory=list)
    views: str = DEFAULT_VIEWS

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "excerpt": self.excerpt,
            "image": self.image,
            "author": self.author,
            "date": self.date,
            "read_time": self.read_time,
            "category": self.category,
            "status": self.status,
            "tags": list(self.tags),
            "views": self.views,
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Post:
        return cls(
            id=d["id"],
            title=d.get("title", ""),
            content=d.get("content", ""),
            excerpt=d.get("excerpt", ""),
            image=d.get("image", ""),
            author=d.get("author", ""),
            date=d.get("date", ""),
            read_time=d.get("read_time", ""),
            category=d.get("category", ""),
            status=d.get("status", "draft"),
            tags=list(d.get("tags", [])),
            views=d.get("views", DEFAULT_VIEWS),
        )


@dataclass
class Comment:
    """A reader reaction to the post currently open."""

    id: str
    author: str
    content: str
    date: str
    avatar: str = DEFAULT_AVATAR
    likes: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "author": self.author,
            "avatar": self.avatar,
            "content": self.content,
            "date": self.date,
            "likes": self.likes,
        }


@dataclass
class StoreError:
    """Why an intent was rejected."""

    kind: str
    message: str

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


@dataclass
class StoreResult:
    """
    Result of processing one intent against a store.
    Stores never throw for rejected intents; they always return one of these.
    """

    ok: bool
    value: Any = None
    error: StoreError | None = None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def ok(value: Any = None) -> StoreResult:
    return StoreResult(ok=True, value=value)


def reject(kind: str, message: str) -> StoreResult:
    return StoreResult(ok=False, error=StoreError(kind=kind, message=message))


def parse_views(value: str) -> float:
    """
    Parse a compact view count back to a number.

      "250"  → 250
      "1.5K" → 1500

    Raises ValueError for anything that is not a non-negative count.
    """
    match = VIEWS_PATTERN.match(value.strip())
    if not match:
        raise ValueError(f"not a view count: {value!r}")
    number = float(match.group(1))
    return number * 1000 if match.group(2) == "K" else number


def format_thousands(total: float) -> str:
    """Dashboard display for an aggregate view count: 1750 → "1.8K"."""
    return f"{total / 1000:.1f}K"


def is_iso_date(value: str) -> bool:
    """Return True if value is a calendar date in YYYY-MM-DD form."""
    try:
        date.fromisoformat(value)
    except (TypeError, ValueError):
        return False
    return len(value) == 10


def today_iso() -> str:
    """Current UTC calendar date as YYYY-MM-DD."""
    return datetime.now(UTC).strftime("%Y-%m-%d")
