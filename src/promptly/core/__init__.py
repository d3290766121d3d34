"""Core del SDK.

Por qué:
- Aquí viven la configuración, el error del SDK, los contratos y los DTOs.
- El core no conoce httpx: solo conceptos del API remoto.
"""
