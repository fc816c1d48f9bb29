"""
Newsroom Kernel — Post Repository

Owns the canonical collection of posts. Every intent returns a StoreResult;
nothing raises for a rejected intent.

Intents are atomic: all fields are validated first, and only a fully valid
intent touches storage.
"""

from __future__ import annotations

import copy
import logging
from typing import Any
from uuid import uuid4

from newsroom.kernel.types import (
    DEFAULT_VIEWS,
    DERIVED_POST_FIELDS,
    NOT_FOUND,
    POST_FIELDS,
    POST_STATUSES,
    VALIDATION_ERROR,
    Post,
    StoreResult,
    is_iso_date,
    ok,
    parse_views,
    reject,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Storage protocol
# ---------------------------------------------------------------------------


class PostStorage:
    """
    Abstract storage interface.
    The kernel ships an in-memory implementation; a durable one can be
    plugged in without changing the repository contract.
    """

    def get(self, post_id: str) -> Post | None:
        """Fetch a post. Returns None if not found."""
        raise NotImplementedError

    def put(self, post: Post) -> None:
        """Insert or replace a post. New ids go to the end of the listing."""
        raise NotImplementedError

    def delete(self, post_id: str) -> None:
        raise NotImplementedError

    def values(self) -> list[Post]:
        """All posts, insertion order."""
        raise NotImplementedError


class MemoryPostStorage(PostStorage):
    """In-memory storage. State is lost when the process exits."""

    def __init__(self) -> None:
        # dicts keep insertion order; replacing a key keeps its slot
        self.posts: dict[str, Post] = {}

    def get(self, post_id: str) -> Post | None:
        return self.posts.get(post_id)

    def put(self, post: Post) -> None:
        self.posts[post.id] = post

    def delete(self, post_id: str) -> None:
        self.posts.pop(post_id, None)

    def values(self) -> list[Post]:
        return list(self.posts.values())


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def _dedupe(tags: list[str]) -> list[str]:
    seen: set[str] = set()
    result = []
    for tag in tags:
        if tag not in seen:
            seen.add(tag)
            result.append(tag)
    return result


def _validate_fields(fields: dict[str, Any], *, partial: bool) -> str | None:
    """
    Check caller-supplied post fields.
    Returns an error message, or None if the fields are acceptable.
    """
    derived = DERIVED_POST_FIELDS & fields.keys()
    if derived:
        return f"fields are assigned by the repository: {sorted(derived)}"

    unknown = set(fields) - set(POST_FIELDS)
    if unknown:
        return f"unknown fields: {sorted(unknown)}"

    if not partial and "title" not in fields:
        return "title is required"

    for name, value in fields.items():
        if name == "tags":
            if not isinstance(value, list | tuple) or not all(isinstance(t, str) for t in value):
                return "tags must be a list of strings"
        elif not isinstance(value, str):
            return f"{name} must be a string"

    if "title" in fields and not fields["title"].strip():
        return "title must not be empty"
    if "status" in fields and fields["status"] not in POST_STATUSES:
        return f"status must be one of {list(POST_STATUSES)}"
    if fields.get("date") and not is_iso_date(fields["date"]):
        return f"date must be YYYY-MM-DD, got {fields['date']!r}"
    return None


def _normalize(fields: dict[str, Any]) -> dict[str, Any]:
    normalized = dict(fields)
    if "tags" in normalized:
        normalized["tags"] = _dedupe(list(normalized["tags"]))
    return normalized


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


class PostRepository:
    """All post operations. Returned posts are copies; callers cannot mutate state."""

    def __init__(self, storage: PostStorage | None = None) -> None:
        self.storage = storage if storage is not None else MemoryPostStorage()

    def create(self, fields: dict[str, Any]) -> StoreResult:
        """
        Create a post from everything except `id` and `views`.

        Returns:
            StoreResult whose value is the new Post
        """
        error = _validate_fields(fields, partial=False)
        if error:
            return reject(VALIDATION_ERROR, error)

        post = Post(id=uuid4().hex, views=DEFAULT_VIEWS, **_normalize(fields))
        self.storage.put(post)
        logger.info("posts: created %s (%s) status=%s", post.id, post.title, post.status)
        return ok(copy.deepcopy(post))

    def get(self, post_id: str) -> StoreResult:
        post = self.storage.get(post_id)
        if post is None:
            return reject(NOT_FOUND, f"post {post_id!r} does not exist")
        return ok(copy.deepcopy(post))

    def update(self, post_id: str, partial: dict[str, Any]) -> StoreResult:
        """
        Merge the fields present in `partial` into an existing post.
        Fields not present are left untouched.
        """
        existing = self.storage.get(post_id)
        if existing is None:
            return reject(NOT_FOUND, f"post {post_id!r} does not exist")

        error = _validate_fields(partial, partial=True)
        if error:
            return reject(VALIDATION_ERROR, error)

        merged = copy.deepcopy(existing)
        for name, value in _normalize(partial).items():
            setattr(merged, name, value)
        self.storage.put(merged)
        logger.info("posts: updated %s fields=%s", post_id, sorted(partial))
        return ok(copy.deepcopy(merged))

    def delete(self, post_id: str) -> StoreResult:
        if self.storage.get(post_id) is None:
            return reject(NOT_FOUND, f"post {post_id!r} does not exist")
        self.storage.delete(post_id)
        logger.info("posts: deleted %s", post_id)
        return ok()

    def list(self) -> list[Post]:
        """Snapshot of all posts in insertion order."""
        return copy.deepcopy(self.storage.values())

    def filter_by_status(self, status: str) -> list[Post]:
        """Posts with the given status. An unknown status matches nothing."""
        return [p for p in self.list() if p.status == status]

    def load(self, posts: list[Post]) -> StoreResult:
        """
        Restore existing posts (ids and view counts included), e.g. demo content.
        Rejects the whole batch if any post is malformed.
        """
        for post in posts:
            if not post.id:
                return reject(VALIDATION_ERROR, "restored posts need an id")
            fields = {name: getattr(post, name) for name in POST_FIELDS}
            error = _validate_fields(fields, partial=False)
            if error:
                return reject(VALIDATION_ERROR, f"{post.id}: {error}")
            try:
                parse_views(post.views)
            except ValueError as e:
                return reject(VALIDATION_ERROR, f"{post.id}: {e}")

        for post in posts:
            self.storage.put(copy.deepcopy(post))
        logger.info("posts: loaded %d posts", len(posts))
        return ok(len(posts))

    def aggregate_views(self) -> float:
        """Sum of parsed view counts over all posts. Reporting only."""
        return sum((parse_views(p.views) for p in self.storage.values()), 0.0)
