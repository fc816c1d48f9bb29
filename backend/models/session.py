"""Admin session models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class LoginRequest(BaseModel):
    """Request to log into the admin area."""

    model_config = ConfigDict(extra="forbid")

    email: str
    password: str


class SessionResponse(BaseModel):
    authenticated: bool
