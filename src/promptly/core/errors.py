"""Error único expuesto por el SDK.

Clasificación por `status`:
- `0`: fallo de transporte o de parseo (DNS, conexión, JSON inválido).
- `408`: la llamada no terminó dentro del timeout configurado.
- cualquier otro valor: el status HTTP devuelto por el servidor.
"""

from __future__ import annotations

STATUS_TRANSPORT = 0
STATUS_TIMEOUT = 408


class PromptlyError(Exception):
    """Fallo de una llamada al API.

    `errors` contiene los errores de validación por campo (`campo -> [mensajes]`)
    cuando el servidor los envía.
    """

    def __init__(
        self,
        message: str,
        status: int,
        errors: dict[str, list[str]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.errors = errors

    @property
    def is_timeout(self) -> bool:
        return self.status == STATUS_TIMEOUT

    @property
    def is_transport_error(self) -> bool:
        return self.status == STATUS_TRANSPORT

    def __repr__(self) -> str:
        return f"PromptlyError(message={self.message!r}, status={self.status}, errors={self.errors!r})"
