"""
Logging setup for the SportConnect service.

Every module logs through ``logging.getLogger(__name__)``, so all
service records pass through the ``sportconnect_api`` package logger.
``setup_logging`` attaches handlers to that logger only, leaving the
root logger (and uvicorn's own loggers) alone.  Calling it again adds
only what is missing: the console handler once, and a file handler
once per log file.
"""

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "sportconnect_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _has_console(logger: logging.Logger) -> bool:
    return any(type(h) is logging.StreamHandler for h in logger.handlers)


def _has_file(logger: logging.Logger, path: Path) -> bool:
    return any(
        isinstance(h, logging.FileHandler) and Path(h.baseFilename) == path
        for h in logger.handlers
    )


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure the package logger and return it.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``).  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Also write records to this file (``LOG_FILE`` setting).  The
        parent directory is created if needed.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not _has_console(logger):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        if not _has_file(logger, log_path):
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
