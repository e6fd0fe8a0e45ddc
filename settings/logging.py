"""Logging configuration."""

import logging
import sys

from loguru import logger

from settings import IS_PRODUCTION, LOG_DIR

# Stdlib loggers routed into loguru
STDLIB_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi")


class _InterceptHandler(logging.Handler):
    """Forward stdlib log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: str = "INFO", to_file: bool = True, json: bool = IS_PRODUCTION):
    """Configure console output (JSON lines when `json`) and an optional daily file."""
    logger.remove()

    if json:
        logger.add(sys.stdout, level=level, serialize=True)
    else:
        logger.add(
            sys.stderr,
            format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>",
            level=level,
            colorize=True,
        )

    if to_file:
        LOG_DIR.mkdir(exist_ok=True)
        logger.add(
            LOG_DIR / "chain_cache_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}",
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
            compression="gz",
            enqueue=True,
        )
        logger.info("Logging to {}", LOG_DIR)

    for name in STDLIB_LOGGERS:
        std = logging.getLogger(name)
        std.handlers = [_InterceptHandler()]
        std.propagate = False

    return logger
