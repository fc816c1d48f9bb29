"""Read-only page payloads: home, categories, admin dashboard, post view."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from backend.models.comment import CommentResponse
from backend.models.post import PostResponse
from newsroom.kernel.catalog import Category
from newsroom.kernel.views import AuthorCard, DashboardStats


class HomeResponse(BaseModel):
    """Featured post plus the latest posts after it."""

    featured: PostResponse | None
    latest: list[PostResponse]


class CategoryResponse(BaseModel):
    id: str
    name: str
    description: str

    @classmethod
    def from_category(cls, category: Category) -> CategoryResponse:
        return cls(id=category.id, name=category.name, description=category.description)


class CategoryPostsResponse(BaseModel):
    category: CategoryResponse
    posts: list[PostResponse]


class AuthorResponse(BaseModel):
    name: str
    handle: str

    @classmethod
    def from_card(cls, card: AuthorCard) -> AuthorResponse:
        return cls(name=card.name, handle=card.handle)


class PostViewResponse(BaseModel):
    """Everything the post page shows."""

    post: PostResponse
    author: AuthorResponse
    comments: list[CommentResponse]


class DashboardResponse(BaseModel):
    """Admin dashboard stats and the post table."""

    model_config = ConfigDict(populate_by_name=True)

    total_posts: int = Field(alias="totalPosts")
    published: int
    drafts: int
    total_views: str = Field(alias="totalViews")
    popular: list[PostResponse]
    posts: list[PostResponse]

    @classmethod
    def from_stats(
        cls, stats: DashboardStats, popular: list[PostResponse], posts: list[PostResponse]
    ) -> DashboardResponse:
        return cls(
            total_posts=stats.total_posts,
            published=stats.published,
            drafts=stats.drafts,
            total_views=stats.total_views_display,
            popular=popular,
            posts=posts,
        )
