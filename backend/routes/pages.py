"""Read-only page payloads — home, categories, open post, admin dashboard."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from backend.auth import require_admin
from backend.models.comment import CommentResponse
from backend.models.pages import (
    AuthorResponse,
    CategoryPostsResponse,
    CategoryResponse,
    DashboardResponse,
    HomeResponse,
    PostViewResponse,
)
from backend.models.post import PostResponse
from backend.store import get_site
from backend.utils.results import unwrap
from newsroom.kernel import views
from newsroom.kernel.catalog import get_category
from newsroom.kernel.router import PostPage
from newsroom.kernel.site import Site

router = APIRouter(prefix="/api/pages", tags=["pages"])


@router.get("/home", status_code=200)
def home(site: Annotated[Site, Depends(get_site)]) -> HomeResponse:
    """Editor's pick and the latest published posts."""
    posts = site.published_posts()
    featured = views.featured_post(posts)
    return HomeResponse(
        featured=PostResponse.from_post(featured) if featured else None,
        latest=[PostResponse.from_post(p) for p in views.latest_posts(posts)],
    )


@router.get("/categories", status_code=200)
def categories(site: Annotated[Site, Depends(get_site)]) -> list[CategoryResponse]:
    return [CategoryResponse.from_category(c) for c in site.categories()]


@router.get("/categories/{category_id}", status_code=200)
def category_posts(category_id: str, site: Annotated[Site, Depends(get_site)]) -> CategoryPostsResponse:
    """Published posts tagged with one category."""
    category = get_category(category_id)
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found.")
    posts = views.posts_in_category(site.published_posts(), category_id)
    return CategoryPostsResponse(
        category=CategoryResponse.from_category(category),
        posts=[PostResponse.from_post(p) for p in posts],
    )


@router.get("/post", status_code=200)
def open_post(site: Annotated[Site, Depends(get_site)]) -> PostViewResponse:
    """
    The post page for the current location.
    Navigate to ("post", id) first; 404 when no post is open.
    """
    location = site.router.location
    if not isinstance(location, PostPage):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No post is open.")

    post = unwrap(site.get_post(location.post_id))
    if post.status != "published" and not site.is_authenticated():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found.")
    return PostViewResponse(
        post=PostResponse.from_post(post),
        author=AuthorResponse.from_card(views.author_card(post.author)),
        comments=[CommentResponse.from_comment(c) for c in site.list_comments()],
    )


@router.get("/admin", status_code=200)
def dashboard(site: Annotated[Site, Depends(require_admin)]) -> DashboardResponse:
    """Stats cards, the popular list and the full post table (drafts included)."""
    posts = site.list_posts()
    return DashboardResponse.from_stats(
        site.dashboard(),
        popular=[PostResponse.from_post(p) for p in views.popular_posts(posts)],
        posts=[PostResponse.from_post(p) for p in posts],
    )
