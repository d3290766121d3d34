"""Recurso de blog (solo lectura, público)."""

from __future__ import annotations

import builtins
from typing import Any

from promptly.adapters.pagination import as_list
from promptly.adapters.resources.base import BaseResource
from promptly.core.domain.blog import BlogPost
from promptly.core.domain.common import ListParams, ListResponse, PayloadLike, to_payload


def _with(params: ListParams | PayloadLike | None, **overrides: Any) -> dict[str, Any]:
    merged: dict[str, Any] = dict(to_payload(params) or {})
    merged.update(overrides)
    return merged


class BlogResource(BaseResource):
    async def list(self, params: ListParams | PayloadLike | None = None) -> ListResponse[BlogPost]:
        """Listado paginado. Filtros: `category`, `tag`, `search`, más los de `ListParams`."""

        return await self._http.get_list("/public/blog", to_payload(params), model=BlogPost)

    async def get(self, slug: str) -> BlogPost:
        return self._parse(BlogPost, await self._http.get(f"/public/blog/{slug}"))

    async def get_by_id(self, post_id: int) -> BlogPost:
        return self._parse(BlogPost, await self._http.get(f"/public/blog/id/{post_id}"))

    async def featured(self, limit: int = 5) -> builtins.list[BlogPost]:
        response = await self._http.get_list(
            "/public/blog",
            {"per_page": limit, "featured": True},
            model=BlogPost,
        )
        return response.data

    async def by_category(
        self,
        category: str,
        params: ListParams | PayloadLike | None = None,
    ) -> ListResponse[BlogPost]:
        return await self._http.get_list("/public/blog", _with(params, category=category), model=BlogPost)

    async def by_tag(
        self,
        tag: str,
        params: ListParams | PayloadLike | None = None,
    ) -> ListResponse[BlogPost]:
        return await self._http.get_list("/public/blog", _with(params, tag=tag), model=BlogPost)

    async def search(
        self,
        query: str,
        params: ListParams | PayloadLike | None = None,
    ) -> ListResponse[BlogPost]:
        return await self._http.get_list("/public/blog", _with(params, search=query), model=BlogPost)

    async def categories(self) -> builtins.list[str]:
        return as_list(await self._http.get("/public/blog/categories"), str)

    async def tags(self) -> builtins.list[str]:
        return as_list(await self._http.get("/public/blog/tags"), str)
