"""Navigation routes — where the reader is, and moving them."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from backend.models.navigation import LocationResponse, NavigateRequest
from backend.store import get_site
from backend.utils.results import unwrap
from newsroom.kernel.site import Site

router = APIRouter(prefix="/api/navigation", tags=["navigation"])


@router.get("", status_code=200)
def current_location(site: Annotated[Site, Depends(get_site)]) -> LocationResponse:
    return LocationResponse.from_current(site.current())


@router.post("", status_code=200)
def navigate(req: NavigateRequest, site: Annotated[Site, Depends(get_site)]) -> LocationResponse:
    """Move to a page. Opening a post also opens its comments."""
    unwrap(site.navigate(req.page, req.context))
    return LocationResponse.from_current(site.current())
