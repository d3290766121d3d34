"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: los recursos dependen de abstracciones.
"""

from promptly.core.interfaces.transport import Transport

__all__ = ["Transport"]
