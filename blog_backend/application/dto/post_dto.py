from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from .base import CamelModel


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("Title must not be blank")
    return value


class PostCreateRequest(CamelModel):
    """DTO for post creation request. Author comes from the session only."""
    title: str = Field(min_length=4, max_length=100)
    content: Optional[str] = Field(default=None, min_length=1, max_length=500)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        return _require_text(value)


class PostUpdateRequest(CamelModel):
    """DTO for post update request"""
    title: str = Field(min_length=4, max_length=100)
    content: str = Field(min_length=1, max_length=500)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        return _require_text(value)


class PostResponse(CamelModel):
    """DTO for post response (author reference omitted)"""
    id: str
    title: str
    content: Optional[str] = None
    created_at: Optional[datetime] = None
    edited: bool = False


class PostWithAuthorResponse(PostResponse):
    """DTO for post response joined with the author's display name"""
    author_name: str


class PostEnvelope(CamelModel):
    msg: str
    post: PostResponse


class PostDetailEnvelope(CamelModel):
    msg: str
    post: PostWithAuthorResponse


class PostListResponse(CamelModel):
    msg: str
    posts: List[PostWithAuthorResponse]


def to_post_response(post) -> PostResponse:
    return PostResponse(
        id=post.id,
        title=post.title,
        content=post.content,
        created_at=post.created_at,
        edited=post.edited,
    )


def to_post_with_author_response(row) -> PostWithAuthorResponse:
    post = row.post
    return PostWithAuthorResponse(
        id=post.id,
        title=post.title,
        content=post.content,
        created_at=post.created_at,
        edited=post.edited,
        author_name=row.author_name,
    )
