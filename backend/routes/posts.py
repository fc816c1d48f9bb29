"""Post routes — list, get, create, update, delete."""

from __future__ import annotations

from typing import Annotated, Literal

from fastapi import APIRouter, Depends, HTTPException, Query, status

from backend.auth import require_admin
from backend.models.post import CreatePostRequest, PostResponse, UpdatePostRequest
from backend.store import get_site
from backend.utils.results import unwrap
from newsroom.kernel.site import Site


router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.get("", status_code=200)
def list_posts(
    site: Annotated[Site, Depends(get_site)],
    status_filter: Annotated[Literal["draft", "published"] | None, Query(alias="status")] = None,
) -> list[PostResponse]:
    """
    List posts in insertion order, optionally by status.
    Readers only ever see published posts; drafts need an admin session.
    """
    if not site.is_authenticated():
        if status_filter == "draft":
            return []
        status_filter = "published"
    posts = site.filter_posts(status_filter) if status_filter else site.list_posts()
    return [PostResponse.from_post(p) for p in posts]


@router.get("/{post_id}", status_code=200)
def get_post(post_id: str, site: Annotated[Site, Depends(get_site)]) -> PostResponse:
    """Get a single post. Drafts are hidden from readers."""
    post = unwrap(site.get_post(post_id))
    if post.status != "published" and not site.is_authenticated():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found.")
    return PostResponse.from_post(post)


@router.post("", status_code=201)
def create_post(req: CreatePostRequest, site: Annotated[Site, Depends(require_admin)]) -> PostResponse:
    """Create a post, then return the admin to the post list."""
    post = unwrap(site.create_post(req.model_dump()))
    site.navigate("admin")
    return PostResponse.from_post(post)


@router.patch("/{post_id}", status_code=200)
def update_post(
    post_id: str,
    req: UpdatePostRequest,
    site: Annotated[Site, Depends(require_admin)],
) -> PostResponse:
    """Merge the sent fields into a post. Unsent fields are untouched."""
    post = unwrap(site.update_post(post_id, req.model_dump(exclude_unset=True)))
    site.navigate("admin")
    return PostResponse.from_post(post)


@router.delete("/{post_id}", status_code=204)
def delete_post(post_id: str, site: Annotated[Site, Depends(require_admin)]) -> None:
    """Delete a post and its comments. Cannot be undone."""
    unwrap(site.delete_post(post_id))
    site.navigate("admin")
