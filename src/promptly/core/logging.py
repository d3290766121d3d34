"""Logging del SDK.

Una librería no configura handlers por su cuenta: el paquete instala un
`NullHandler` y las aplicaciones (o la CLI con `--verbose`) llaman a
`configure_logging`.
"""

from __future__ import annotations

import logging

LOGGER_NAME = "promptly"

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Adjunta un `StreamHandler` al logger `promptly`.

    Raises:
        ValueError: si el nivel no es válido.
    """

    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nivel de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level_upper)

    # Evita handlers duplicados si se llama más de una vez.
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    return logger
