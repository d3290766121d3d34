"""Configuración del cliente.

Resolución (de mayor a menor prioridad):
- argumentos explícitos de `Promptly(...)`;
- variables `PROMPTLY_*`;
- `.env` del directorio actual, luego el `.env` de usuario que escribe
  `promptly doctor setup`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from dotenv import set_key
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://promptly.webbyon.com"
DEFAULT_TIMEOUT_MS = 30_000

APP_DIR_NAME = "promptly"


def get_user_config_dir() -> Path:
    """%APPDATA% en Windows, Application Support en macOS, XDG en el resto."""

    home = Path.home()
    if os.name == "nt":
        root = Path(os.environ.get("APPDATA") or home / "AppData" / "Roaming")
    elif sys.platform == "darwin":
        root = home / "Library" / "Application Support"
    else:
        root = Path(os.environ.get("XDG_CONFIG_HOME") or home / ".config")
    return root / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def write_user_env_vars(values: dict[str, str | None]) -> Path:
    """Fija claves en el .env de usuario (python-dotenv); las demás se conservan.

    Las claves con valor `None` no se tocan.
    """

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.touch(exist_ok=True)
    for key, value in values.items():
        if value is None:
            continue
        set_key(env_path, key, value, quote_mode="never")
    return env_path


class ClientSettings(BaseSettings):
    """Configuración de construcción del cliente.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (args/env vars) antes de la primera request.
    - Un único contrato de configuración para facade, transporte y CLI.
    """

    model_config = SettingsConfigDict(
        env_prefix="PROMPTLY_",
        extra="ignore",
        case_sensitive=False,
        # El último archivo gana: el .env del proyecto pisa al de usuario.
        env_file=(str(get_user_env_file()), ".env"),
        env_file_encoding="utf-8",
    )

    tenant_id: str = Field(
        ...,
        min_length=1,
        description="Tenant (sitio) incluido en cada path: /api/{tenant_id}/...",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="URL base del API, sin la barra final.",
    )
    timeout: int = Field(
        default=DEFAULT_TIMEOUT_MS,
        gt=0,
        description="Timeout por request (milisegundos).",
    )
    user_agent: str = Field(
        default="promptly-sdk-python/0.1",
        min_length=1,
        description="User-Agent enviado en cada request.",
    )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value[:-1] if value.endswith("/") else value

    @property
    def timeout_seconds(self) -> float:
        return self.timeout / 1000
