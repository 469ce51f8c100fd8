"""
Core module - errors, identifiers and logging.
"""
from accounts_mongo.core.exceptions import (
    AccountsStoreError,
    UserNotFoundError,
    InvalidUserIdError,
    IndexSetupError,
)
from accounts_mongo.core.ids import to_mongo_id
from accounts_mongo.core.logging import get_logger, setup_logging

__all__ = [
    "AccountsStoreError",
    "UserNotFoundError",
    "InvalidUserIdError",
    "IndexSetupError",
    "to_mongo_id",
    "get_logger",
    "setup_logging",
]
