"""
accounts_mongo - MongoDB credential storage for an accounts service.

Stores password hashes, password reset tokens, email verification tokens
and email address records on user documents.
"""
from accounts_mongo.config import MongoOptions, Settings, Timestamps, get_settings
from accounts_mongo.core.exceptions import (
    AccountsStoreError,
    IndexSetupError,
    InvalidUserIdError,
    UserNotFoundError,
)
from accounts_mongo.models.user import User
from accounts_mongo.services.credential_store import CredentialStore

__version__ = "0.1.0"

__all__ = [
    "CredentialStore",
    "MongoOptions",
    "Timestamps",
    "Settings",
    "get_settings",
    "User",
    "AccountsStoreError",
    "UserNotFoundError",
    "InvalidUserIdError",
    "IndexSetupError",
]
