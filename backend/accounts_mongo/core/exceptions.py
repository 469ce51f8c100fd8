"""
Exceptions raised by the accounts storage layer.
"""
from typing import Any, Optional


class AccountsStoreError(Exception):
    """
    Base exception for the accounts storage layer.
    """
    def __init__(self, message: str, code: str = "STORE_ERROR", details: Optional[Any] = None):
        self.message = message
        self.code = code
        self.details = details
        super().__init__(self.message)


class UserNotFoundError(AccountsStoreError, LookupError):
    """
    Raised when a targeted update matched no user document.
    """
    def __init__(self, message: str = "User not found", details: Optional[Any] = None):
        super().__init__(message, code="USER_NOT_FOUND", details=details)


class InvalidUserIdError(AccountsStoreError, ValueError):
    """
    Raised when a user id cannot be converted to a MongoDB ObjectId.
    """
    def __init__(self, message: str = "Invalid user id", details: Optional[Any] = None):
        super().__init__(message, code="INVALID_USER_ID", details=details)


class IndexSetupError(AccountsStoreError):
    """
    Raised when the users collection indexes cannot be created.
    """
    def __init__(self, message: str = "Failed to create indexes", details: Optional[Any] = None):
        super().__init__(message, code="INDEX_SETUP_FAILED", details=details)
