"""Modelos comunes del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Da DTOs de solo lectura con documentación autocontenida (Field) sin acoplar
  el core a httpx.
- Tolera campos nuevos del servidor (`extra="allow"`) sin romper a los clientes.

Nota:
- `ListResponse` es la única forma que el SDK garantiza localmente: `data`
  siempre es una lista y `meta` siempre trae los seis contadores.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

ItemT = TypeVar("ItemT")

DEFAULT_META: dict[str, int | None] = {
    "current_page": 1,
    "last_page": 1,
    "per_page": 15,
    "total": 0,
    "from": None,
    "to": None,
}


class ApiModel(BaseModel):
    """Base de los DTOs devueltos por el API: inmutables y tolerantes."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _null_as_default(cls, data: Any) -> Any:
        """Un `null` del servidor en un campo con default cuenta como ausente.

        El API omite o anula indistintamente los opcionales (`images`, `is_active`, ...);
        sin esto un solo ítem con `null` tumbaría el listado entero.
        """

        if not isinstance(data, dict):
            return data
        defaulted = set()
        for name, field in cls.model_fields.items():
            if field.is_required() or (field.default is None and field.default_factory is None):
                continue
            defaulted.add(name)
            if field.alias:
                defaulted.add(field.alias)
        return {key: value for key, value in data.items() if value is not None or key not in defaulted}


class RequestModel(BaseModel):
    """Base de los payloads enviados al API.

    Los campos opcionales sin valor no se envían (ver `to_payload`).
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class PaginationMeta(ApiModel):
    current_page: int = Field(default=1, description="Página actual (1-based).")
    last_page: int = Field(default=1, description="Última página disponible.")
    per_page: int = Field(default=15, description="Tamaño de página.")
    total: int = Field(default=0, description="Total de elementos en todas las páginas.")
    from_: int | None = Field(
        default=None,
        alias="from",
        description="Índice (1-based) del primer elemento de la página, si hay elementos.",
    )
    to: int | None = Field(
        default=None,
        description="Índice (1-based) del último elemento de la página, si hay elementos.",
    )


class ListResponse(ApiModel, Generic[ItemT]):
    """Forma canónica de cualquier listado."""

    data: list[ItemT] = Field(default_factory=list)
    meta: PaginationMeta = Field(default_factory=PaginationMeta)


class ListParams(RequestModel):
    page: int | None = None
    per_page: int | None = None
    sort: str | None = None
    order: str | None = Field(default=None, description="'asc' | 'desc'")


class Media(ApiModel):
    id: int
    url: str | None = None
    thumbnail_url: str | None = None
    filename: str | None = None
    mime_type: str | None = None
    size: int | None = None
    created_at: str | None = None


PayloadLike = Mapping[str, Any] | BaseModel


def to_payload(data: PayloadLike | None) -> dict[str, Any] | None:
    """Convierte un modelo o mapping en el dict que viaja como JSON/query.

    - Modelos: `model_dump(by_alias=True, exclude_none=True)`.
    - Mappings: se copian tal cual (un `None` explícito se respeta en el body).
    """

    if data is None:
        return None
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", by_alias=True, exclude_none=True)
    return dict(data)
