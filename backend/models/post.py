"""Post models. Field names follow the site client (camelCase `readTime`)."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from newsroom.kernel.types import Post


class CreatePostRequest(BaseModel):
    """What the admin sends to create a post. `id` and `views` are assigned by the server."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    title: str = Field(min_length=1, max_length=300)
    content: str = ""
    excerpt: str = ""
    image: str = ""
    author: str = ""
    date: str = ""
    read_time: str = Field(default="", alias="readTime")
    category: str = ""
    status: Literal["draft", "published"] = "draft"
    tags: list[str] = Field(default_factory=list)


class UpdatePostRequest(BaseModel):
    """What the admin sends to edit a post. Only fields that are sent get merged."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    title: str | None = Field(default=None, max_length=300)
    content: str | None = None
    excerpt: str | None = None
    image: str | None = None
    author: str | None = None
    date: str | None = None
    read_time: str | None = Field(default=None, alias="readTime")
    category: str | None = None
    status: Literal["draft", "published"] | None = None
    tags: list[str] | None = None


class PostResponse(BaseModel):
    """What the API returns."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    content: str
    excerpt: str
    image: str
    author: str
    date: str
    read_time: str = Field(alias="readTime")
    category: str
    status: str
    tags: list[str]
    views: str

    @classmethod
    def from_post(cls, post: Post) -> PostResponse:
        """Convert a kernel Post to the API response."""
        return cls(**post.to_dict())
