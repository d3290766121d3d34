from __future__ import annotations

from pydantic import Field

from promptly.core.domain.common import ApiModel


class BlogPost(ApiModel):
    id: int
    slug: str | None = None
    title: str | None = None
    content: str | None = None
    excerpt: str | None = None
    featured_image: str | None = None
    category: str | None = None
    tags: list[str] = Field(default_factory=list)
    author_name: str | None = None
    is_published: bool = True
    published_at: str | None = None
    view_count: int = 0
    seo_title: str | None = None
    seo_description: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
