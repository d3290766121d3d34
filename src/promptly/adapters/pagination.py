"""Normalización de listados.

Por qué un módulo propio:
- El API devuelve listados con formas distintas según el endpoint: array
  suelto, `{data}`, `{data, meta}` o `{data, current_page, ...}` (paginador plano).
- Resolver la forma una sola vez aquí evita que cada recurso ramifique por tipo.

`normalize_list_response` es total: cualquier entrada produce un
`ListResponse` con `data` lista y los seis contadores de `meta`.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import ValidationError

from promptly.core.domain.common import DEFAULT_META, ListResponse
from promptly.core.errors import STATUS_TRANSPORT, PromptlyError

ItemT = TypeVar("ItemT")

_META_FIELDS = ("current_page", "last_page", "per_page", "total", "from", "to")


def _computed_meta(count: int) -> dict[str, Any]:
    meta = dict(DEFAULT_META)
    meta["total"] = count
    meta["from"] = 1 if count > 0 else None
    meta["to"] = count if count > 0 else None
    return meta


def normalize_list_payload(raw: Any) -> dict[str, Any]:
    """Devuelve `{"data": [...], "meta": {...}}` como dicts planos."""

    if isinstance(raw, list):
        return {"data": raw, "meta": _computed_meta(len(raw))}

    if isinstance(raw, dict):
        data = raw.get("data")
        items: list[Any] = data if isinstance(data, list) else []
        nested = raw.get("meta")
        nested_meta: dict[str, Any] = nested if isinstance(nested, dict) else {}
        fallback = _computed_meta(len(items))

        meta: dict[str, Any] = {}
        for key in _META_FIELDS:
            # `None` cuenta como ausente en ambos niveles.
            value = nested_meta.get(key)
            if value is None:
                value = raw.get(key)
            if value is None:
                value = fallback[key]
            meta[key] = value
        return {"data": items, "meta": meta}

    # None, escalares y cualquier otra cosa.
    return {"data": [], "meta": dict(DEFAULT_META)}


def normalize_list_response(raw: Any, model: type[ItemT] | None = None) -> ListResponse[Any]:
    """Normaliza `raw` a `ListResponse`, validando cada ítem en `model` si se indica.

    Raises:
        PromptlyError: (status 0) si los ítems o contadores no encajan en el modelo.
    """

    payload = normalize_list_payload(raw)
    response_model = ListResponse[model] if model is not None else ListResponse[Any]
    try:
        return response_model.model_validate(payload)
    except ValidationError as exc:
        raise PromptlyError(f"Invalid list response: {exc}", STATUS_TRANSPORT) from exc


def as_list(raw: Any, model: type[ItemT] | None = None) -> list[Any]:
    """Solo los ítems del listado normalizado (endpoints "siempre array")."""

    return list(normalize_list_response(raw, model).data)
