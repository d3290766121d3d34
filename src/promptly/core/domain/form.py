"""DTOs de formularios y envíos."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from promptly.core.domain.common import ApiModel


class FormFieldOption(ApiModel):
    label: str
    value: str


class FormFieldValidation(ApiModel):
    min: float | None = None
    max: float | None = None
    pattern: str | None = None
    message: str | None = None


class FormField(ApiModel):
    id: str
    type: str = Field(
        default="text",
        description="text | email | phone | number | textarea | select | radio | checkbox | date | time | file",
    )
    name: str | None = None
    label: str | None = None
    placeholder: str | None = None
    required: bool = False
    options: list[FormFieldOption] = Field(default_factory=list)
    validation: FormFieldValidation | None = None


class FormSettings(ApiModel):
    submit_button_text: str | None = None
    success_message: str | None = None
    redirect_url: str | None = None
    notify_email: str | None = None


class Form(ApiModel):
    id: int
    slug: str | None = None
    name: str | None = None
    description: str | None = None
    fields: list[FormField] = Field(default_factory=list)
    settings: FormSettings | None = None
    is_active: bool = True
    created_at: str | None = None
    updated_at: str | None = None


class FormSubmission(ApiModel):
    id: int
    form_id: int | None = None
    form: Form | None = None
    member_id: int | None = None
    data: dict[str, Any] = Field(default_factory=dict)
    status: str = Field(default="pending", description="pending | reviewed | completed")
    created_at: str | None = None
    updated_at: str | None = None
