"""Tests de configuración de logging."""

from __future__ import annotations

import logging

import pytest

from promptly.core.logging import LOGGER_NAME, configure_logging


@pytest.fixture
def restore_logger():
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


class TestConfigureLogging:
    def test_package_has_null_handler(self) -> None:
        import promptly  # noqa: F401

        handlers = logging.getLogger(LOGGER_NAME).handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    def test_sets_level_and_single_stream_handler(self, restore_logger) -> None:
        configure_logging("debug")
        configure_logging("DEBUG")

        streams = [
            h
            for h in restore_logger.handlers
            if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.NullHandler)
        ]
        assert restore_logger.level == logging.DEBUG
        assert len(streams) == 1

    def test_invalid_level(self, restore_logger) -> None:
        with pytest.raises(ValueError, match="inválido"):
            configure_logging("LOUD")
