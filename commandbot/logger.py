"""Logging configuration for the chat command bot."""

from __future__ import annotations

from datetime import datetime
import logging
from pathlib import Path
import sys

from commandbot.config import LoggingConfig

logger = logging.getLogger("commandbot")


def setup_logging(config: LoggingConfig) -> logging.Logger:
    """Set up logging to a dated file and, when interactive, the console."""
    level = getattr(logging, str(config.level).upper(), logging.INFO)
    logger.setLevel(level)
    logger.handlers.clear()

    log_dir = Path(config.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(
        log_dir / f"{datetime.now().strftime('%Y-%m-%d')}.log", encoding="utf-8"
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(file_handler)

    if sys.stdout is not None and sys.stdout.isatty():
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(message)s", datefmt="%H:%M:%S")
        )
        logger.addHandler(console_handler)

    return logger


__all__ = ["logger", "setup_logging"]
