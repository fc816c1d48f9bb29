"""Admin session routes — login, logout, status."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from backend.models.session import LoginRequest, SessionResponse
from backend.store import get_site
from backend.utils.results import unwrap
from newsroom.kernel.site import Site

router = APIRouter(prefix="/api/session", tags=["session"])


@router.get("", status_code=200)
def get_session(site: Annotated[Site, Depends(get_site)]) -> SessionResponse:
    return SessionResponse(authenticated=site.is_authenticated())


@router.post("/login", status_code=200)
def login(req: LoginRequest, site: Annotated[Site, Depends(get_site)]) -> SessionResponse:
    """
    Log into the admin area.
    A mismatch returns 401 with an inline message; the session is unchanged.
    """
    unwrap(site.login(req.email, req.password))
    return SessionResponse(authenticated=True)


@router.post("/logout", status_code=200)
def logout(site: Annotated[Site, Depends(get_site)]) -> SessionResponse:
    site.logout()
    return SessionResponse(authenticated=False)
