"""Application-wide logger writing to platformdirs user_log_dir.

Everything under the ``yawmak`` logger hierarchy ends up in one rotating file;
nothing is printed to the terminal.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "yawmak"
LOG_FILE = "yawmak.log"
MAX_BYTES = 5 * 1024 * 1024
BACKUP_COUNT = 3
LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

_logger: logging.Logger | None = None


def log_file_path() -> Path:
    """Location of the current log file."""
    return Path(user_log_dir(APP_NAME)) / LOG_FILE


def _build_handler() -> logging.Handler:
    path = log_file_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.handlers.RotatingFileHandler(
            path, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8"
        )
    except OSError:
        # read-only home directory
        return logging.NullHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def get_logger() -> logging.Logger:
    """Return the ``yawmak`` logger, attaching the file handler on first call.

    Module loggers created with ``logging.getLogger(__name__)`` propagate to it.
    """
    global _logger
    if _logger is None:
        logger = logging.getLogger(APP_NAME)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
        if not logger.handlers:
            logger.addHandler(_build_handler())
        _logger = logger
    return _logger
