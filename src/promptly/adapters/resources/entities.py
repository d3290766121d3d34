"""Recurso de entidades personalizadas.

Las entidades son estructuras de datos dinámicas que cada tenant define
(p.ej. `customer`); sus registros guardan los valores en `record.data`.

Ejemplo:

    customers: TypedEntityAccessor[Customer] = client.entities.typed("customer")
    page = await customers.list({"data.tier": "vip"})
    record = await customers.create({"company": "ABC Corp"}, status="active")
"""

from __future__ import annotations

import builtins
from typing import Any, Generic, TypeVar

from promptly.adapters.resources.base import BaseResource
from promptly.core.domain.common import ListParams, ListResponse, PayloadLike, to_payload
from promptly.core.domain.entity import (
    CreateEntityRecordData,
    CustomEntity,
    EntityRecord,
    EntitySchema,
    UpdateEntityRecordData,
)

DataT = TypeVar("DataT")


def _record_body(data: Any, status: str | None) -> dict[str, Any]:
    body: dict[str, Any] = {}
    if data is not None:
        body["data"] = to_payload(data)
    if status is not None:
        body["status"] = status
    return body


class EntitiesResource(BaseResource):
    # Entidades (públicas)

    async def list(self) -> builtins.list[CustomEntity]:
        """Entidades activas del tenant; siempre una lista."""

        response = await self._http.get_list("/public/entities", model=CustomEntity)
        return response.data

    async def get_schema(self, slug: str) -> EntitySchema:
        return self._parse(EntitySchema, await self._http.get(f"/public/entities/{slug}/schema"))

    # Registros (lectura pública)

    async def list_records(
        self,
        slug: str,
        params: ListParams | PayloadLike | None = None,
    ) -> ListResponse[EntityRecord]:
        """Listado paginado. Acepta filtros por campo de datos (`{"data.tier": "vip"}`)."""

        return await self._http.get_list(f"/public/entities/{slug}", to_payload(params), model=EntityRecord)

    async def get_record(self, slug: str, record_id: int) -> EntityRecord:
        return self._parse(EntityRecord, await self._http.get(f"/public/entities/{slug}/{record_id}"))

    # Registros (requieren auth)

    async def create_record(self, slug: str, data: CreateEntityRecordData | PayloadLike) -> EntityRecord:
        return self._parse(EntityRecord, await self._http.post(f"/entities/{slug}", to_payload(data)))

    async def update_record(
        self,
        slug: str,
        record_id: int,
        data: UpdateEntityRecordData | PayloadLike,
    ) -> EntityRecord:
        return self._parse(
            EntityRecord,
            await self._http.put(f"/entities/{slug}/{record_id}", to_payload(data)),
        )

    async def delete_record(self, slug: str, record_id: int) -> None:
        await self._http.delete(f"/entities/{slug}/{record_id}")

    # Helpers

    @staticmethod
    def get_value(record: EntityRecord, field: str) -> Any:
        return record.data.get(field)

    def typed(self, slug: str) -> TypedEntityAccessor[Any]:
        """Accesor CRUD ligado a `slug`. Solo reenvía: no valida `data`."""

        return TypedEntityAccessor(self, slug)


class TypedEntityAccessor(Generic[DataT]):
    """Las cinco operaciones CRUD de una entidad, con el tipo de `data` acotado a `DataT`."""

    def __init__(self, resource: EntitiesResource, slug: str) -> None:
        self._resource = resource
        self.slug = slug

    async def list(self, params: ListParams | PayloadLike | None = None) -> ListResponse[EntityRecord]:
        return await self._resource.list_records(self.slug, params)

    async def get(self, record_id: int) -> EntityRecord:
        return await self._resource.get_record(self.slug, record_id)

    async def create(self, data: DataT, status: str | None = None) -> EntityRecord:
        return await self._resource.create_record(self.slug, _record_body(data, status))

    async def update(self, record_id: int, data: DataT | None = None, status: str | None = None) -> EntityRecord:
        return await self._resource.update_record(self.slug, record_id, _record_body(data, status))

    async def delete(self, record_id: int) -> None:
        await self._resource.delete_record(self.slug, record_id)
