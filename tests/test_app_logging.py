"""Tests for logging configuration."""

import logging

from ayur_nutrition.app_logging import LOGGER_NAME, configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()

    configured = configure_logging()
    first_count = len(logger.handlers)

    configure_logging(debug=True)
    second_count = len(logger.handlers)

    assert configured is logger
    assert first_count == 1
    assert second_count == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_default_level_is_info() -> None:
    assert configure_logging().level == logging.INFO
