"""
Newsroom Kernel — Site

Owns one of each store and exposes the intent/query surface the
presentation layer calls. The stores stay independent; the site only adds
the cross-store effects:

  navigate to a post  → the comment ledger opens that post, if it exists
  delete a post       → its comments are dropped and an open post page
                        falls back to home
"""

from __future__ import annotations

import logging
from typing import Any

from newsroom.kernel import views
from newsroom.kernel.catalog import CATEGORIES, Category
from newsroom.kernel.comments import DEFAULT_AUTHOR, CommentLedger
from newsroom.kernel.posts import PostRepository, PostStorage
from newsroom.kernel.router import HOME, Location, NavigationRouter, PostPage
from newsroom.kernel.seed import DEMO_POSTS, demo_comments
from newsroom.kernel.session import DEFAULT_ADMIN_EMAIL, DEFAULT_ADMIN_PASSWORD, SessionGuard
from newsroom.kernel.types import NOT_FOUND, Comment, Post, StoreResult, reject

logger = logging.getLogger(__name__)


class Site:
    """The whole client-side state of the newsroom."""

    def __init__(
        self,
        *,
        admin_email: str = DEFAULT_ADMIN_EMAIL,
        admin_password: str = DEFAULT_ADMIN_PASSWORD,
        storage: PostStorage | None = None,
        seed_demo_content: bool = False,
    ) -> None:
        self.posts = PostRepository(storage)
        self.comments = CommentLedger(seed=demo_comments if seed_demo_content else None)
        self.session = SessionGuard(admin_email, admin_password)
        self.router = NavigationRouter()

        if seed_demo_content:
            result = self.posts.load(DEMO_POSTS)
            if not result.ok:
                raise ValueError(f"demo content is malformed: {result.error}")
            logger.info("site: seeded %d demo posts", result.value)

    # -- navigation ---------------------------------------------------------

    def navigate(self, page: str, context: str | None = None) -> StoreResult:
        result = self.router.navigate(page, context)
        if result.ok:
            self._sync_comment_scope(result.value)
        return result

    def go(self, location: Location) -> StoreResult:
        return self.navigate(location.page, location.context)

    def current(self) -> tuple[str, str | None]:
        return self.router.current()

    def _sync_comment_scope(self, location: Location) -> None:
        if isinstance(location, PostPage) and self.posts.get(location.post_id).ok:
            self.comments.scope_to(location.post_id)
        else:
            self.comments.unscope()

    # -- session ------------------------------------------------------------

    def login(self, identifier: str, secret: str) -> StoreResult:
        return self.session.login(identifier, secret)

    def logout(self) -> None:
        self.session.logout()

    def is_authenticated(self) -> bool:
        return self.session.is_authenticated()

    # -- posts --------------------------------------------------------------

    def create_post(self, fields: dict[str, Any]) -> StoreResult:
        return self.posts.create(fields)

    def update_post(self, post_id: str, partial: dict[str, Any]) -> StoreResult:
        return self.posts.update(post_id, partial)

    def delete_post(self, post_id: str) -> StoreResult:
        result = self.posts.delete(post_id)
        if result.ok:
            self.comments.drop(post_id)
            if self.router.location == PostPage(post_id):
                self.go(HOME)
        return result

    def get_post(self, post_id: str) -> StoreResult:
        return self.posts.get(post_id)

    def list_posts(self) -> list[Post]:
        return self.posts.list()

    def filter_posts(self, status: str) -> list[Post]:
        return self.posts.filter_by_status(status)

    # -- comments -----------------------------------------------------------

    def add_comment(self, content: str, author: str = DEFAULT_AUTHOR) -> StoreResult:
        scope = self.comments.scope
        if scope is not None and not self.posts.get(scope).ok:
            return reject(NOT_FOUND, f"post {scope!r} does not exist")
        return self.comments.add_comment(content, author)

    def like_comment(self, comment_id: str) -> StoreResult:
        return self.comments.like_comment(comment_id)

    def list_comments(self) -> list[Comment]:
        return self.comments.list()

    # -- projections --------------------------------------------------------

    def published_posts(self) -> list[Post]:
        return self.posts.filter_by_status("published")

    def categories(self) -> tuple[Category, ...]:
        return CATEGORIES

    def dashboard(self) -> views.DashboardStats:
        return views.dashboard_stats(self.posts.list())
