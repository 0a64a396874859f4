"""Tests for logging configuration."""

import logging
from pathlib import Path

from filekit import File
from filekit.config.models import LoggingSettings
from filekit.logs import LOGGER_NAME, configure_logging


def test_configure_logging_is_idempotent() -> None:
    logger = configure_logging(LoggingSettings(level="info"))
    configure_logging(LoggingSettings(level="info"))

    assert logger.name == LOGGER_NAME
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


def test_file_operations_reach_rotating_log(tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "filekit.log"
    configure_logging(LoggingSettings(level="DEBUG", file=str(log_path)))
    target = tmp_path / "data.txt"
    target.write_text("payload", encoding="utf-8")

    entity = File(target)
    entity.truncate()
    entity.delete()
    for handler in logging.getLogger(LOGGER_NAME).handlers:
        handler.flush()

    text = log_path.read_text(encoding="utf-8")
    assert f"Truncated {target} to 0 bytes" in text
    assert f"Deleted {target}" in text

    configure_logging(LoggingSettings())
