"""Promptly SDK: cliente asíncrono del API de contenido/comercio de Promptly.

Los DTOs viven en `promptly.core.domain`.
"""

import logging

from promptly.adapters.pagination import normalize_list_response
from promptly.adapters.resources import TypedEntityAccessor
from promptly.client import Promptly
from promptly.core.config import ClientSettings
from promptly.core.domain.common import DEFAULT_META, ListResponse, PaginationMeta
from promptly.core.errors import PromptlyError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_META",
    "ClientSettings",
    "ListResponse",
    "PaginationMeta",
    "Promptly",
    "PromptlyError",
    "TypedEntityAccessor",
    "normalize_list_response",
]
