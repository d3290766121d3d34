"""Recurso de media: archivos subidos por el usuario (requiere auth)."""

from __future__ import annotations

import builtins
from collections.abc import Iterable

from promptly.adapters.resources.base import BaseResource
from promptly.core.domain.common import ListParams, ListResponse, Media, PayloadLike, to_payload
from promptly.core.interfaces.transport import FileInput


class MediaResource(BaseResource):
    async def list(self, params: ListParams | PayloadLike | None = None) -> ListResponse[Media]:
        return await self._http.get_list("/media", to_payload(params), model=Media)

    async def get(self, media_id: int) -> Media:
        return self._parse(Media, await self._http.get(f"/media/{media_id}"))

    async def upload(
        self,
        file: FileInput,
        *,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> Media:
        response = await self._http.upload(
            "/media",
            file,
            "file",
            filename=filename,
            content_type=content_type,
        )
        return self._parse(Media, response)

    async def upload_multiple(self, files: Iterable[FileInput]) -> builtins.list[Media]:
        """Sube los archivos uno a uno, en orden; el primer fallo corta la secuencia."""

        results: builtins.list[Media] = []
        for file in files:
            results.append(await self.upload(file))
        return results

    async def delete(self, media_id: int) -> None:
        await self._http.delete(f"/media/{media_id}")
