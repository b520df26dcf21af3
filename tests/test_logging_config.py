"""Tests for logging setup."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from loan_mcp.logging_config import LOG_FILE_NAME, SERVICE_LOGGER, setup_logging


@pytest.fixture
def service_logger():
    logger = logging.getLogger(SERVICE_LOGGER)
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []


def test_setup_logging_writes_rotating_file(tmp_path, service_logger) -> None:
    setup_logging(log_dir=str(tmp_path), log_level="debug")

    assert service_logger.level == logging.DEBUG
    file_handlers = [h for h in service_logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1

    logging.getLogger("loan_mcp.service").info("hello from test")
    file_handlers[0].flush()
    assert "hello from test" in (tmp_path / LOG_FILE_NAME).read_text(encoding="utf-8")


def test_setup_logging_is_idempotent(tmp_path, service_logger) -> None:
    setup_logging(log_dir=str(tmp_path))
    setup_logging(log_dir=str(tmp_path))
    assert len(service_logger.handlers) == 2


def test_console_handler_only_shows_warnings(tmp_path, service_logger) -> None:
    setup_logging(log_dir=str(tmp_path), log_level="info")
    console = [h for h in service_logger.handlers if not isinstance(h, RotatingFileHandler)]
    assert len(console) == 1
    assert console[0].level == logging.WARNING
