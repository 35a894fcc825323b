#
# logging_setup.py
# Lockfile Guard
#
# Opt-in logging configuration for programs that want to see lockfile activity on stdout and, optionally, in a rotating file.
#
# Thales Matheus Mendonça Santos - November 2025
#
"""Logging configuration helpers."""
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from .config import DEFAULT_SETTINGS, LockfileSettings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logging(settings: LockfileSettings = DEFAULT_SETTINGS, logger_name: Optional[str] = None) -> logging.Logger:
    """
    Configure a stdout handler (+ rotating file handler when ``settings.log_file`` is set).
    Safe to call multiple times; existing handlers are reused.
    """
    logger = logging.getLogger(logger_name or settings.logger_name)
    # The package-level NullHandler does not count as configuration.
    if any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        return logger

    logger.setLevel(logging.DEBUG)

    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            str(settings.log_file),
            maxBytes=settings.log_max_bytes,
            backupCount=settings.log_backup_count,
        )
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(fh)

    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(logging.DEBUG)
    ch.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(ch)
    return logger


__all__ = ["setup_logging"]
