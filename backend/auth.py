"""
Admin gate for the newsroom.

The session guard owns the flag; this module only consults it before admin
views are served.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, status

from backend.store import get_site
from newsroom.kernel.site import Site


def require_admin(site: Annotated[Site, Depends(get_site)]) -> Site:
    """
    FastAPI dependency for admin-only routes.

    Returns:
        The site, once the admin session is confirmed

    Raises:
        HTTPException: If no admin is logged in
    """
    if not site.is_authenticated():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated. Please sign in.",
        )
    return site
