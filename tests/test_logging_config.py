"""Tests for the package logging setup."""

from __future__ import annotations

import logging

import pytest

from sportconnect_api.app.core.config import Settings
from sportconnect_api.app.core.db import MemorySnapshotStorage
from sportconnect_api.app.core.logging_config import PACKAGE_LOGGER, setup_logging
from sportconnect_api.app.main import create_app


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    saved_handlers, saved_level = list(logger.handlers), logger.level
    logger.handlers = []
    yield logger
    for handler in logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    logger.handlers = saved_handlers
    logger.setLevel(saved_level)


def file_handlers(logger: logging.Logger) -> list[logging.FileHandler]:
    return [h for h in logger.handlers if isinstance(h, logging.FileHandler)]


def test_logfile_receives_service_records(package_logger, tmp_path):
    log_path = tmp_path / "logs" / "service.log"

    setup_logging("DEBUG", str(log_path))
    logging.getLogger("sportconnect_api.app.services.match_store").info("store ready")
    for handler in file_handlers(package_logger):
        handler.flush()

    assert len(file_handlers(package_logger)) == 1
    assert package_logger.level == logging.DEBUG
    assert "[INFO] sportconnect_api.app.services.match_store: store ready" in log_path.read_text(encoding="utf-8")


def test_repeated_setup_adds_no_duplicate_handlers(package_logger, tmp_path):
    log_path = str(tmp_path / "service.log")

    setup_logging("INFO", log_path)
    setup_logging("INFO", log_path)
    setup_logging("INFO")

    assert len(file_handlers(package_logger)) == 1
    assert len(package_logger.handlers) == 2


def test_create_app_attaches_configured_log_file(package_logger, tmp_path):
    log_path = tmp_path / "app.log"
    settings = Settings(min_latency_ms=0, max_latency_ms=0, log_file=str(log_path))

    create_app(settings=settings, storage=MemorySnapshotStorage())

    assert [h.baseFilename for h in file_handlers(package_logger)] == [str(log_path.resolve())]
