"""DTOs de autenticación y miembros."""

from __future__ import annotations

from pydantic import Field

from promptly.core.domain.common import ApiModel, RequestModel


class Member(ApiModel):
    id: int
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    avatar: str | None = None
    is_active: bool = True
    created_at: str | None = None
    updated_at: str | None = None


class AuthResponse(ApiModel):
    """Respuesta de login/registro/callback social.

    `token` es el bearer que el SDK captura automáticamente.
    """

    member: Member | None = None
    token: str | None = Field(default=None, description="Bearer token emitido por el API.")
    token_type: str | None = None


class SocialProvider(ApiModel):
    name: str
    enabled: bool = False


class SocialAuthUrl(ApiModel):
    url: str
    provider: str | None = None


class LoginCredentials(RequestModel):
    email: str
    password: str


class RegisterData(RequestModel):
    name: str
    email: str
    password: str
    password_confirmation: str
    phone: str | None = None


class ForgotPasswordData(RequestModel):
    email: str


class ResetPasswordData(RequestModel):
    email: str
    token: str
    password: str
    password_confirmation: str


class UpdateProfileData(RequestModel):
    name: str | None = None
    phone: str | None = None
    avatar: str | None = None
    current_password: str | None = None
    password: str | None = None
    password_confirmation: str | None = None
