"""Recurso de tableros: boards y posts (públicos), escritura y comentarios (con auth)."""

from __future__ import annotations

import builtins

from promptly.adapters.resources.base import BaseResource
from promptly.core.domain.board import (
    Board,
    BoardComment,
    BoardPost,
    CreateCommentData,
    CreatePostData,
    UpdateCommentData,
    UpdatePostData,
)
from promptly.core.domain.common import ListParams, ListResponse, PayloadLike, to_payload


class BoardsResource(BaseResource):
    # Boards (públicos)

    async def list(self, params: ListParams | PayloadLike | None = None) -> ListResponse[Board]:
        return await self._http.get_list("/public/boards", to_payload(params), model=Board)

    async def get(self, id_or_slug: int | str) -> Board:
        return self._parse(Board, await self._http.get(f"/public/boards/{id_or_slug}"))

    # Posts (públicos)

    async def list_posts(
        self,
        board_id_or_slug: int | str,
        params: ListParams | PayloadLike | None = None,
    ) -> ListResponse[BoardPost]:
        return await self._http.get_list(
            f"/public/boards/{board_id_or_slug}/posts",
            to_payload(params),
            model=BoardPost,
        )

    async def get_post(self, post_id: int) -> BoardPost:
        return self._parse(BoardPost, await self._http.get(f"/public/posts/{post_id}"))

    # Posts (requieren auth)

    async def create_post(self, data: CreatePostData | PayloadLike) -> BoardPost:
        return self._parse(BoardPost, await self._http.post("/posts", to_payload(data)))

    async def update_post(self, post_id: int, data: UpdatePostData | PayloadLike) -> BoardPost:
        return self._parse(BoardPost, await self._http.put(f"/posts/{post_id}", to_payload(data)))

    async def delete_post(self, post_id: int) -> None:
        await self._http.delete(f"/posts/{post_id}")

    # Comentarios

    async def list_comments(self, post_id: int) -> builtins.list[BoardComment]:
        """Comentarios de un post; siempre una lista."""

        response = await self._http.get_list(f"/public/posts/{post_id}/comments", model=BoardComment)
        return response.data

    async def create_comment(self, post_id: int, data: CreateCommentData | PayloadLike) -> BoardComment:
        return self._parse(
            BoardComment,
            await self._http.post(f"/posts/{post_id}/comments", to_payload(data)),
        )

    async def update_comment(self, comment_id: int, data: UpdateCommentData | PayloadLike) -> BoardComment:
        return self._parse(
            BoardComment,
            await self._http.put(f"/comments/{comment_id}", to_payload(data)),
        )

    async def delete_comment(self, comment_id: int) -> None:
        await self._http.delete(f"/comments/{comment_id}")
