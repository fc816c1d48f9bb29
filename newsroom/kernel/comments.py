"""
Newsroom Kernel — Comment Ledger

Append-only comment lists keyed by post id. One post is "in scope" at a time
(the post being read); add/like/list act on that post's list.

Lists start empty. A seed may be supplied to pre-populate a post's list the
first time it is opened.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable
from uuid import uuid4

from newsroom.kernel.types import (
    DEFAULT_AVATAR,
    NOT_FOUND,
    VALIDATION_ERROR,
    Comment,
    StoreResult,
    ok,
    reject,
    today_iso,
)

logger = logging.getLogger(__name__)

DEFAULT_AUTHOR = "You"

CommentSeed = Callable[[str], list[Comment]]


class CommentLedger:
    """Owns every post's comments and which post is currently open."""

    def __init__(self, seed: CommentSeed | None = None) -> None:
        self._comments: dict[str, list[Comment]] = {}
        self._scope: str | None = None
        self._seed = seed

    @property
    def scope(self) -> str | None:
        return self._scope

    def scope_to(self, post_id: str) -> None:
        """Open `post_id`'s comments, creating its list on first visit."""
        if post_id not in self._comments:
            seeded = self._seed(post_id) if self._seed else []
            self._comments[post_id] = [copy.deepcopy(c) for c in seeded]
        self._scope = post_id

    def unscope(self) -> None:
        self._scope = None

    def add_comment(self, content: str, author: str = DEFAULT_AUTHOR) -> StoreResult:
        """
        Append a comment to the open post.

        Returns:
            StoreResult whose value is the new Comment
        """
        if not content.strip():
            return reject(VALIDATION_ERROR, "comment must not be empty")
        if self._scope is None:
            return reject(VALIDATION_ERROR, "no post is open for comments")

        comment = Comment(
            id=uuid4().hex,
            author=author,
            avatar=DEFAULT_AVATAR,
            content=content,
            date=today_iso(),
            likes=0,
        )
        self._comments[self._scope].append(comment)
        logger.info("comments: %s added %s on %s", author, comment.id, self._scope)
        return ok(copy.deepcopy(comment))

    def like_comment(self, comment_id: str) -> StoreResult:
        for comment in self._comments.get(self._scope, []):
            if comment.id == comment_id:
                comment.likes += 1
                return ok(copy.deepcopy(comment))
        return reject(NOT_FOUND, f"comment {comment_id!r} does not exist")

    def list(self) -> list[Comment]:
        """Comments on the open post, oldest first. Empty when nothing is open."""
        if self._scope is None:
            return []
        return copy.deepcopy(self._comments[self._scope])

    def drop(self, post_id: str) -> None:
        """Forget a post's comments (the post was deleted)."""
        self._comments.pop(post_id, None)
        if self._scope == post_id:
            self._scope = None
