"""Comment routes for the post currently open."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from backend.models.comment import AddCommentRequest, CommentResponse
from backend.store import get_site
from backend.utils.results import unwrap
from newsroom.kernel.router import PostPage
from newsroom.kernel.site import Site

router = APIRouter(prefix="/api/comments", tags=["comments"])


def readable_site(site: Annotated[Site, Depends(get_site)]) -> Site:
    """
    Dependency: the site, provided the open post is visible to the caller.
    Drafts are hidden from readers, and so are their comments.
    """
    location = site.router.location
    if isinstance(location, PostPage) and not site.is_authenticated():
        result = site.get_post(location.post_id)
        if result.ok and result.value.status != "published":
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found.")
    return site


@router.get("", status_code=200)
def list_comments(site: Annotated[Site, Depends(readable_site)]) -> list[CommentResponse]:
    """Comments on the open post, oldest first. Empty when no post is open."""
    return [CommentResponse.from_comment(c) for c in site.list_comments()]


@router.post("", status_code=201)
def add_comment(req: AddCommentRequest, site: Annotated[Site, Depends(readable_site)]) -> CommentResponse:
    comment = unwrap(site.add_comment(req.content, req.author))
    return CommentResponse.from_comment(comment)


@router.post("/{comment_id}/like", status_code=200)
def like_comment(comment_id: str, site: Annotated[Site, Depends(readable_site)]) -> CommentResponse:
    comment = unwrap(site.like_comment(comment_id))
    return CommentResponse.from_comment(comment)
