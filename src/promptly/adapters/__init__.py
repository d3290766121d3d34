"""Adaptadores de I/O.

Por qué aquí:
- `http_client` es el único módulo que habla httpx.
- `pagination` y `resources` traducen payloads del API a DTOs del dominio.
"""
