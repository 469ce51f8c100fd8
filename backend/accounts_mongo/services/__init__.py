"""
Service layer for credential storage.
"""
from accounts_mongo.services.credential_store import CredentialStore

__all__ = [
    "CredentialStore",
]
