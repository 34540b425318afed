"""
Logging configuration for Job Tracker.

Console output for the running app plus a rotating log file under
config.LOG_DIR.
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from jobtracker.core import config

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_NAME = "jobtracker.log"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5

# Libraries that are chatty at INFO
QUIET_LOGGERS = ("uvicorn", "uvicorn.access", "alembic", "sqlalchemy.engine")


def _with_format(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=DATE_FORMAT))
    return handler


def setup_logging(log_level: str = config.LOG_LEVEL, log_dir: Path = config.LOG_DIR):
    """
    Replace the root logger's handlers with console + rotating file output.

    Unknown level names fall back to INFO.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(_with_format(logging.StreamHandler(sys.stdout), level, CONSOLE_FORMAT))
    root.addHandler(_with_format(
        RotatingFileHandler(
            log_dir / LOG_FILE_NAME,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
            encoding="utf-8",
        ),
        level,
        FILE_FORMAT,
    ))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
