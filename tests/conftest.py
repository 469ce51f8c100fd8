"""
Global test fixtures for accounts_mongo.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- A fixed clock for timestamp assertions
- Test user document factories
"""

from datetime import datetime

import pytest
import pytest_asyncio
from bson import ObjectId
from mongomock_motor import AsyncMongoMockClient


FIXED_NOW = datetime(2024, 12, 29, 10, 0, 0)


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    This provides an in-memory MongoDB that behaves like the real thing
    for testing purposes.
    """
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_accounts_db(mock_async_mongo_client):
    """Provide mock accounts database."""
    yield mock_async_mongo_client["accounts"]


# =============================================================================
# Clock Fixtures
# =============================================================================

@pytest.fixture
def fixed_now() -> datetime:
    """Datetime returned by fixed_clock."""
    return FIXED_NOW


@pytest.fixture
def fixed_clock(fixed_now):
    """Clock returning a constant datetime."""
    return lambda: fixed_now


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture
def user_id() -> ObjectId:
    """ObjectId of the default test user."""
    return ObjectId("65a1b2c3d4e5f6a7b8c9d0e1")


@pytest.fixture
def user_doc(user_id) -> dict:
    """Raw users collection document with a password and one verified email."""
    return {
        "_id": user_id,
        "username": "johndoe",
        "emails": [{"address": "john@example.com", "verified": True}],
        "services": {
            "password": {"bcrypt": "$2b$12$existinghashexistinghashexistinghashexistinghas"},
        },
        "createdAt": datetime(2024, 1, 1, 0, 0, 0),
        "updatedAt": datetime(2024, 1, 1, 0, 0, 0),
    }


@pytest.fixture
def missing_user_id() -> str:
    """Valid ObjectId string that no test user owns."""
    return "65a1b2c3d4e5f6a7b8c9ffff"
