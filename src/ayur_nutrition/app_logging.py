"""Logging setup for the engine and its HTTP surface."""

import logging

LOGGER_NAME = "ayur_nutrition"
LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(*, debug: bool = False) -> logging.Logger:
    """Attach one stream handler to the package logger and return it.

    Repeated calls only adjust the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
