"""Navigation models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class NavigateRequest(BaseModel):
    """Where the client wants to go. `context` is a post id or a category id."""

    model_config = ConfigDict(extra="forbid")

    page: str
    context: str | None = None


class LocationResponse(BaseModel):
    page: str
    context: str | None = None

    @classmethod
    def from_current(cls, current: tuple[str, str | None]) -> LocationResponse:
        page, context = current
        return cls(page=page, context=context)
