"""Helpers compartidos por los recursos.

Cada recurso elige el endpoint, delega en el `Transport` y convierte el
payload desenvuelto en DTOs del dominio.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from promptly.core.errors import STATUS_TRANSPORT, PromptlyError
from promptly.core.interfaces.transport import Transport

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseResource:
    def __init__(self, http: Transport) -> None:
        self._http = http

    @staticmethod
    def _parse(model: type[ModelT], payload: Any) -> ModelT:
        """Valida un payload del servidor; un payload inválido es un fallo de parseo (status 0)."""

        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise PromptlyError(f"Invalid {model.__name__} response: {exc}", STATUS_TRANSPORT) from exc
