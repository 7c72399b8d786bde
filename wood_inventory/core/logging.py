"""Logging setup for the wood inventory client.

Every page calls :func:`configure_logging` through ``get_client``; the first
call in a Streamlit process installs a rotating log file plus console
output on the root logger and purges rotated files past their retention.
"""

import logging
import os
from datetime import datetime, timedelta
from logging.handlers import RotatingFileHandler
from pathlib import Path
from stat import ST_MTIME

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FILE = os.getenv("LOG_FILE", "wood_inventory.log")
LOG_RETENTION_DAYS = int(os.getenv("LOG_RETENTION_DAYS", "30"))
# Loggers of the HTTP stack, held at WARNING or above.
QUIET_LOGGERS = ("urllib3", "requests")

_configured = False


def _level_from_env() -> int:
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def configure_logging() -> None:
    """Configure process-wide logging once.

    The log file rotates at roughly 1MB with up to three backups. ``LOG_LEVEL``
    sets the level for the app's own loggers.
    """

    global _configured
    if _configured:
        return

    level = _level_from_env()
    root = logging.getLogger()
    root.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)

    file_handler = RotatingFileHandler(LOG_FILE, maxBytes=1_000_000, backupCount=3)
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    _configured = True
    _purge_old_logs()


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a ``wood_inventory`` module."""
    return logging.getLogger(name)


def _purge_old_logs() -> None:
    """Delete rotated log files older than ``LOG_RETENTION_DAYS``."""

    if LOG_RETENTION_DAYS <= 0:
        return

    log_path = Path(LOG_FILE).resolve()
    cutoff = datetime.now() - timedelta(days=LOG_RETENTION_DAYS)
    for file in log_path.parent.glob(f"{log_path.name}.*"):
        try:
            mtime = datetime.fromtimestamp(file.stat()[ST_MTIME])
        except FileNotFoundError:
            continue
        if mtime < cutoff:
            file.unlink(missing_ok=True)


__all__ = ["configure_logging", "get_logger"]
