"""DTOs de entidades personalizadas (estructuras dinámicas definidas por tenant)."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from promptly.core.domain.common import ApiModel, RequestModel


class EntityFieldOption(ApiModel):
    value: str
    label: str | None = None


class EntityField(ApiModel):
    name: str
    label: str | None = None
    type: str = Field(
        default="text",
        description="text | textarea | number | email | url | date | datetime | boolean | select | multiselect",
    )
    required: bool = False
    searchable: bool = False
    default: Any = None
    options: list[EntityFieldOption] = Field(default_factory=list)


class EntityDisplay(ApiModel):
    title_field: str | None = None
    list_fields: str | list[str] | None = None


class EntitySchema(ApiModel):
    fields: list[EntityField] = Field(default_factory=list)
    display: EntityDisplay | None = None


class CustomEntity(ApiModel):
    id: int
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    # `schema` choca con un atributo de BaseModel.
    entity_schema: EntitySchema | None = Field(default=None, alias="schema")
    icon: str | None = None
    is_active: bool = True
    records_count: int | None = None
    created_at: str | None = None
    updated_at: str | None = None


class EntityRecord(ApiModel):
    id: int
    entity_id: int | None = None
    data: dict[str, Any] = Field(default_factory=dict)
    status: str = Field(default="active", description="active | archived | draft")
    created_by: int | None = None
    updated_by: int | None = None
    created_at: str | None = None
    updated_at: str | None = None


class CreateEntityRecordData(RequestModel):
    data: dict[str, Any]
    status: str | None = None


class UpdateEntityRecordData(RequestModel):
    data: dict[str, Any] | None = None
    status: str | None = None
