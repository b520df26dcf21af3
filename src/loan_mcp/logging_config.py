"""
Logging configuration for the loan tools server.

Writes rotating logs to <LOG_DIR>/loan_mcp.log and mirrors warnings to stderr.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from loan_mcp import config

SERVICE_LOGGER = "loan_mcp"
LOG_FILE_NAME = "loan_mcp.log"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_BYTES = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5


def _handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    return handler


def setup_logging(log_dir: Optional[str] = None, log_level: Optional[str] = None) -> logging.Logger:
    """
    Point the `loan_mcp` logger at a rotating file under log_dir (LOG_DIR by
    default) and echo warnings to stderr. Safe to call more than once.
    """
    level_name = (log_level or config.LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.INFO)

    directory = Path(log_dir or config.LOG_DIR)
    directory.mkdir(parents=True, exist_ok=True)

    logging.getLogger().setLevel(level)

    logger = logging.getLogger(SERVICE_LOGGER)
    logger.setLevel(level)
    for stale in logger.handlers:
        stale.close()
    logger.handlers = [
        _handler(
            RotatingFileHandler(
                directory / LOG_FILE_NAME,
                maxBytes=MAX_BYTES,
                backupCount=BACKUP_COUNT,
                encoding="utf-8",
            ),
            level,
        ),
        _handler(logging.StreamHandler(), logging.WARNING),
    ]
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Convenience wrapper to get a named logger.
    """
    return logging.getLogger(name)
