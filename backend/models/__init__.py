"""
Pydantic models for the newsroom API.

All wire shapes defined here. No imports from routes or the store.
"""

from backend.models.comment import AddCommentRequest, CommentResponse
from backend.models.navigation import LocationResponse, NavigateRequest
from backend.models.pages import (
    AuthorResponse,
    CategoryPostsResponse,
    CategoryResponse,
    DashboardResponse,
    HomeResponse,
    PostViewResponse,
)
from backend.models.post import CreatePostRequest, PostResponse, UpdatePostRequest
from backend.models.session import LoginRequest, SessionResponse

__all__ = [
    # Post models
    "CreatePostRequest",
    "UpdatePostRequest",
    "PostResponse",
    # Comment models
    "AddCommentRequest",
    "CommentResponse",
    # Session models
    "LoginRequest",
    "SessionResponse",
    # Navigation models
    "NavigateRequest",
    "LocationResponse",
    # Page models
    "HomeResponse",
    "CategoryResponse",
    "CategoryPostsResponse",
    "AuthorResponse",
    "PostViewResponse",
    "DashboardResponse",
]
