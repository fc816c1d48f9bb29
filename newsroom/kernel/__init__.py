"""
Newsroom Kernel — the content & session state model.

Four stores, each owning its own state and returning StoreResults:
  posts     — post repository (draft/published lifecycle, CRUD)
  comments  — per-post, append-only comment ledger
  session   — admin session guard
  router    — navigation state (page + context)

site ties them together behind one intent/query surface.
views holds the read projections (featured, latest, dashboard stats).
"""

from newsroom.kernel.comments import CommentLedger
from newsroom.kernel.posts import MemoryPostStorage, PostRepository, PostStorage
from newsroom.kernel.router import CategoryPage, NavigationRouter, PostPage, StaticPage
from newsroom.kernel.session import SessionGuard
from newsroom.kernel.site import Site
from newsroom.kernel.types import Comment, Post, StoreError, StoreResult

__all__ = [
    "Site",
    "PostRepository",
    "PostStorage",
    "MemoryPostStorage",
    "CommentLedger",
    "SessionGuard",
    "NavigationRouter",
    "StaticPage",
    "PostPage",
    "CategoryPage",
    "Post",
    "Comment",
    "StoreResult",
    "StoreError",
]
