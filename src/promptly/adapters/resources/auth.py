"""Recurso de autenticación.

Efectos secundarios:
- login/register/social_callback capturan el token devuelto en el transporte.
- logout limpia el token aunque la llamada de red falle.
"""

from __future__ import annotations

import logging
from typing import Any

from promptly.adapters.pagination import as_list
from promptly.adapters.resources.base import BaseResource
from promptly.core.domain.auth import (
    AuthResponse,
    ForgotPasswordData,
    LoginCredentials,
    Member,
    RegisterData,
    ResetPasswordData,
    SocialAuthUrl,
    SocialProvider,
    UpdateProfileData,
)
from promptly.core.domain.common import PayloadLike, to_payload

logger = logging.getLogger(__name__)


class AuthResource(BaseResource):
    async def login(self, credentials: LoginCredentials | PayloadLike) -> AuthResponse:
        """Login con email y password."""

        response = await self._http.post("/auth/login", to_payload(credentials))
        return self._capture(response)

    async def register(self, data: RegisterData | PayloadLike) -> AuthResponse:
        response = await self._http.post("/auth/register", to_payload(data))
        return self._capture(response)

    async def logout(self) -> None:
        try:
            await self._http.post("/auth/logout")
        finally:
            self._http.set_token(None)
            logger.debug("Token cleared on logout")

    async def me(self) -> Member:
        return self._parse(Member, await self._http.get("/profile"))

    async def update_profile(self, data: UpdateProfileData | PayloadLike) -> Member:
        return self._parse(Member, await self._http.put("/profile", to_payload(data)))

    async def forgot_password(self, data: ForgotPasswordData | PayloadLike) -> dict[str, Any]:
        """Envía el email de reseteo. Devuelve `{"message": ...}`."""

        return await self._http.post("/auth/forgot-password", to_payload(data))

    async def reset_password(self, data: ResetPasswordData | PayloadLike) -> dict[str, Any]:
        return await self._http.post("/auth/reset-password", to_payload(data))

    async def get_social_providers(self) -> list[SocialProvider]:
        return as_list(await self._http.get("/auth/social"), SocialProvider)

    async def get_social_auth_url(self, provider: str) -> SocialAuthUrl:
        """URL de redirección para el login social de `provider`."""

        return self._parse(SocialAuthUrl, await self._http.get(f"/auth/social/{provider}"))

    async def social_callback(self, provider: str, code: str) -> AuthResponse:
        response = await self._http.post(f"/auth/social/{provider}/callback", {"code": code})
        return self._capture(response)

    def set_token(self, token: str | None) -> None:
        """Fija el token manualmente (p.ej. restaurado de un almacenamiento)."""

        self._http.set_token(token)

    def get_token(self) -> str | None:
        return self._http.get_token()

    def is_authenticated(self) -> bool:
        return self._http.is_authenticated()

    def _capture(self, payload: Any) -> AuthResponse:
        # El token se guarda antes de validar: un `member` malformado no debe perder la sesión.
        token = payload.get("token") if isinstance(payload, dict) else None
        if token:
            self._http.set_token(str(token))
        return self._parse(AuthResponse, payload)
