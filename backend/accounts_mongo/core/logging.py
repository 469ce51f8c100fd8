"""
Logging configuration for the accounts storage layer.
"""
import logging
import sys
from datetime import datetime
from typing import Optional

from accounts_mongo.config import get_settings

LOGGER_ROOT = "accounts_mongo"


class StoreFormatter(logging.Formatter):
    """Human-readable formatter with optional user context."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        message = f"[{timestamp}] {record.levelname:<8} {record.name}: {record.getMessage()}"

        if hasattr(record, "user_id"):
            message += f" [user={record.user_id}]"

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return message


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger with a stdout handler.

    Args:
        level: Log level name, defaults to Settings.log_level

    Returns:
        The package root logger
    """
    level_name = (level or get_settings().log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StoreFormatter())

    logger = logging.getLogger(LOGGER_ROOT)
    logger.setLevel(log_level)
    logger.handlers.clear()
    logger.addHandler(handler)

    # Driver loggers are noisy at debug level
    logging.getLogger("motor").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the package namespace.

    Args:
        name: Logger name (usually __name__)
    """
    if name == LOGGER_ROOT or name.startswith(LOGGER_ROOT + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_ROOT}.{name}")
