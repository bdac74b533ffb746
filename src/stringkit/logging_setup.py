"""Logging setup for applications embedding stringkit."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import Config

LOGGER_NAME = "stringkit"


@dataclass
class LoggingContext:
    log_level: int
    console_level: int
    logger: logging.Logger
    formatter: logging.Formatter
    log_file: Path | None = None


def initialize_logging(config: Config) -> LoggingContext:
    """Attach console (and optional file) handlers to the ``stringkit`` logger.

    Safe to call more than once: previously attached handlers are removed.
    """
    log_level = _parse_log_level(config.logging.level)
    console_level = _parse_log_level(config.logging.console_level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(min(log_level, console_level))
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_file = config.logging.file
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return LoggingContext(
        log_level=log_level,
        console_level=console_level,
        logger=logger,
        formatter=formatter,
        log_file=log_file,
    )


def _parse_log_level(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)
