"""Logging configuration using loguru.

gram writes discrepancies and errors through click; loguru only
carries diagnostics, always to stderr so stdout stays empty.
"""

import logging
import sys

from loguru import logger

from gram.config.models import LoggingConfig

LOG_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"


class _InterceptHandler(logging.Handler):
    """Route httpx's stdlib logging records through loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.patch(lambda r: r.update(name=record.name)).opt(exception=record.exc_info).log(
            level, record.getMessage()
        )


def configure_logging(config: LoggingConfig) -> None:
    """
    Send loguru output to stderr at the configured level.

    Args:
        config: LoggingConfig with the minimum level to show.
    """
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=config.level)

    # httpx logs each request at INFO; hold it to the same level.
    logging.basicConfig(handlers=[_InterceptHandler()], level=config.level, force=True)

    logger.debug("Logging configured: level={}", config.level)
