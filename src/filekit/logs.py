"""Logging setup for applications embedding filekit."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from filekit.config.models import LoggingSettings

LOGGER_NAME = "filekit"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: LoggingSettings | None = None) -> logging.Logger:
    """Attach handlers to the ``filekit`` logger according to ``settings``.

    Handlers installed by a previous call are replaced, so calling this more
    than once does not duplicate output.

    Args:
        settings: Logging settings; defaults are used when omitted.

    Returns:
        logging.Logger: The configured package logger.
    """
    settings = settings or LoggingSettings()
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(_FORMAT)
    stream = logging.StreamHandler()
    stream.setFormatter(formatter)
    logger.addHandler(stream)

    if settings.file:
        log_path = Path(settings.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        rotating = RotatingFileHandler(
            log_path,
            maxBytes=settings.max_size_mb * 1024 * 1024,
            backupCount=settings.backup_count,
            encoding="utf-8",
        )
        rotating.setFormatter(formatter)
        logger.addHandler(rotating)

    logger.setLevel(settings.level.upper())
    return logger


__all__ = ["configure_logging", "LOGGER_NAME"]
