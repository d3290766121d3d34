"""DTOs de tableros (boards), posts y comentarios."""

from __future__ import annotations

from pydantic import Field

from promptly.core.domain.auth import Member
from promptly.core.domain.common import ApiModel, Media, RequestModel


class BoardSettings(ApiModel):
    allow_comments: bool = True
    allow_attachments: bool = False
    require_login_to_view: bool = False
    require_login_to_write: bool = True
    posts_per_page: int = 15


class Board(ApiModel):
    id: int
    slug: str | None = None
    name: str | None = None
    description: str | None = None
    settings: BoardSettings | None = None
    posts_count: int | None = None
    created_at: str | None = None
    updated_at: str | None = None


class BoardPost(ApiModel):
    id: int
    board_id: int | None = None
    board: Board | None = None
    member_id: int | None = None
    member: Member | None = None
    title: str | None = None
    content: str | None = None
    excerpt: str | None = None
    is_notice: bool = False
    is_private: bool = False
    view_count: int = 0
    comment_count: int = 0
    attachments: list[Media] = Field(default_factory=list)
    created_at: str | None = None
    updated_at: str | None = None


class BoardComment(ApiModel):
    id: int
    post_id: int | None = None
    member_id: int | None = None
    member: Member | None = None
    parent_id: int | None = None
    content: str | None = None
    replies: list[BoardComment] = Field(default_factory=list)
    created_at: str | None = None
    updated_at: str | None = None


class CreatePostData(RequestModel):
    board_id: int
    title: str
    content: str
    is_notice: bool | None = None
    is_private: bool | None = None
    attachments: list[int] | None = Field(default=None, description="IDs de media adjuntos.")


class UpdatePostData(RequestModel):
    title: str | None = None
    content: str | None = None
    is_notice: bool | None = None
    is_private: bool | None = None
    attachments: list[int] | None = None


class CreateCommentData(RequestModel):
    content: str
    parent_id: int | None = None


class UpdateCommentData(RequestModel):
    content: str
