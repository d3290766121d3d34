"""Recursos del API (facades por área).

Por qué un paquete:
- Agrupa un módulo por área del API (auth, shop, ...).
- Cada recurso depende solo de `core.interfaces.transport.Transport`.
"""

from promptly.adapters.resources.auth import AuthResource
from promptly.adapters.resources.blog import BlogResource
from promptly.adapters.resources.boards import BoardsResource
from promptly.adapters.resources.entities import EntitiesResource, TypedEntityAccessor
from promptly.adapters.resources.forms import FormsResource
from promptly.adapters.resources.media import MediaResource
from promptly.adapters.resources.reservation import ReservationResource
from promptly.adapters.resources.shop import ShopResource

__all__ = [
    "AuthResource",
    "BlogResource",
    "BoardsResource",
    "EntitiesResource",
    "FormsResource",
    "MediaResource",
    "ReservationResource",
    "ShopResource",
    "TypedEntityAccessor",
]
