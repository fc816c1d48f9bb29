"""Comment models for the post currently being read."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from newsroom.kernel.types import Comment


class AddCommentRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    content: str = Field(max_length=2000)
    author: str = Field(default="You", min_length=1, max_length=100)


class CommentResponse(BaseModel):
    id: str
    author: str
    avatar: str
    content: str
    date: str
    likes: int

    @classmethod
    def from_comment(cls, comment: Comment) -> CommentResponse:
        return cls(**comment.to_dict())
