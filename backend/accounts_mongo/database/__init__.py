"""
Database module - MongoDB connection and accounts database definitions.
"""
from accounts_mongo.database.connections import (
    get_mongo_client,
    close_connections,
    get_database,
)
from accounts_mongo.database import accounts_db

__all__ = [
    "get_mongo_client",
    "close_connections",
    "get_database",
    "accounts_db",
]
