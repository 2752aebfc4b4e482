"""
Logging configuration helpers.

Provides a central entry-point to configure the diagnostic logging of the
toolkit's own modules. This is separate from :class:`utilkit.error.ErrorLogger`,
which keeps its own plain text ``log.txt``.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
MAX_LOG_BYTES = 1024 * 1024
BACKUP_COUNT = 3


def _has_file_handler(logger: logging.Logger, filename: Path) -> bool:
    target = str(filename.resolve())
    return any(
        isinstance(handler, RotatingFileHandler) and handler.baseFilename == target
        for handler in logger.handlers
    )


def configure_logging(
    level: str = "INFO",
    log_dir: Optional[Path] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure logging for the application and return the root logger.

    Parameters
    ----------
    level:
        Log level name (e.g., ``INFO``). Unknown names fall back to ``INFO``.
    log_dir:
        Directory where the diagnostic log file should be created. The
        directory is created if it does not already exist.
    log_file:
        Log file name. When provided together with ``log_dir``, a rotating
        file handler is attached in addition to the console handler. Calling
        this function again with the same file does not add a second handler.
    """

    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=LOG_FORMAT)

    root = logging.getLogger()
    root.setLevel(log_level)

    if log_dir and log_file:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        filename = Path(log_dir) / log_file
        if not _has_file_handler(root, filename):
            file_handler = RotatingFileHandler(
                filename=filename,
                maxBytes=MAX_LOG_BYTES,
                backupCount=BACKUP_COUNT,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(file_handler)

    return root


__all__ = ["LOG_FORMAT", "configure_logging"]
