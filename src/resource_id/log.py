"""Logging helpers shared by the library and the CLI."""

import logging
import os

from .config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV

LOGGER_NAME = "resource_id"

LOG_FORMAT = "[%(asctime)s.%(msecs)03d] %(levelname)s [%(name)s]: %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def setup_logging(level=None) -> logging.Logger:
    """
    Attach a stderr handler to the package logger.

    The library never configures logging on import; applications (and the
    CLI) call this once. The level comes from the argument, then from the
    RESOURCE_ID_LOG_LEVEL environment variable, then defaults to WARNING.
    Calling it again only updates the level.
    """
    logger = logging.getLogger(LOGGER_NAME)

    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
        logger.addHandler(handler)

    return logger


def log(logger: logging.Logger, level: str, message: str, **kwargs):
    """Structured logging with optional context."""
    log_method = getattr(logger, level.lower(), logger.info)

    if kwargs:
        context = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        message = f"{message} | {context}"

    log_method(message)
